"""Block device scanner."""
from pathlib import Path
from typing import Callable, List, Optional

from storagedev.core.config import get_config
from storagedev.core.logger import get_logger
from storagedev.devices import get_storage_device
from storagedev.models.device import StorageDevice

logger = get_logger(__name__)

# Kernel-internal and mapped devices that are not physical storage
VIRTUAL_PREFIXES = ("loop", "ram", "zram", "dm-", "nbd")


class StorageDiscovery:
    """Discover block devices exposed in sysfs."""

    def __init__(
        self,
        sysfs_block_root: Optional[str] = None,
        run_cmd: Optional[Callable[[List[str]], List[str]]] = None,
    ):
        self.sysfs_block_root = Path(sysfs_block_root or get_config().sysfs_block_root)
        self.run_cmd = run_cmd

    def discover_devices(self) -> List[StorageDevice]:
        """Return descriptors for all non-virtual block devices, sorted by name."""
        devices = []

        try:
            entries = sorted(self.sysfs_block_root.iterdir(), key=lambda p: p.name)
        except FileNotFoundError:
            logger.warning(f"{self.sysfs_block_root} does not exist, no devices discovered")
            return devices

        for entry in entries:
            name = entry.name
            if name.startswith(VIRTUAL_PREFIXES):
                continue

            # sysfs uses '!' where the device path has a '/'
            device_file = "/dev/" + name.replace("!", "/")
            devices.append(get_storage_device(
                device_file,
                run_cmd=self.run_cmd,
                sysfs_block_root=str(self.sysfs_block_root),
            ))

        return devices
