"""Map device names to descriptor classes."""
import re
from typing import List, Optional, Pattern, Tuple, Type

from storagedev.core.logger import get_logger
from storagedev.devices.types import (
    IdeStorageDevice,
    MmcStorageDevice,
    NvmeStorageDevice,
    OpticalDevice,
    ScsiStorageDevice,
    SoftwareRaidDevice,
    VirtioStorageDevice,
)
from storagedev.models.device import StorageDevice

logger = get_logger(__name__)

_REGISTRY: List[Tuple[Pattern, Type[StorageDevice]]] = []


def register_device_type(pattern: str, device_class: Type[StorageDevice]):
    """Register a descriptor class for device names matching ``pattern``.

    Later registrations take precedence over earlier ones.
    """
    _REGISTRY.insert(0, (re.compile(pattern), device_class))


def find_device_type(device_name: str) -> Optional[Type[StorageDevice]]:
    for pattern, device_class in _REGISTRY:
        if pattern.match(device_name):
            return device_class
    return None


def get_storage_device(device_file: str, **kwargs) -> StorageDevice:
    """Create the most specific descriptor for ``device_file``.

    Accepts a full path (/dev/sda, /dev/disk/by-id/...) or a bare name (sda).
    Extra keyword arguments are passed to the descriptor constructor.
    """
    if not device_file.startswith("/"):
        device_file = f"/dev/{device_file}"

    probe = StorageDevice(device_file, **kwargs)
    device_name = probe.get_device_name(canonical=True)
    device_class = find_device_type(device_name)

    if device_class is None:
        logger.debug(f"No specific type for {device_name}, using generic descriptor")
        return probe

    return device_class(device_file, udev=probe.udev, **{
        k: v for k, v in kwargs.items() if k != 'udev'
    })


register_device_type(r"^vd[a-z]+$", VirtioStorageDevice)
register_device_type(r"^mmcblk\d+$", MmcStorageDevice)
register_device_type(r"^sr\d+$", OpticalDevice)
register_device_type(r"^md\d+$", SoftwareRaidDevice)
register_device_type(r"^nvme\d+n\d+$", NvmeStorageDevice)
register_device_type(r"^hd[a-z]+$", IdeStorageDevice)
register_device_type(r"^sd[a-z]+$", ScsiStorageDevice)
