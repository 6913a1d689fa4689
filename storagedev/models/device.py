"""Storage device descriptor."""
import os
import re
import stat
from pathlib import Path
from typing import Callable, List, Optional

from storagedev.core.config import get_config
from storagedev.core.logger import get_logger
from storagedev.core.process import execute
from storagedev.core.udev import UdevDevice
from storagedev.models.info import DeviceInfo

logger = get_logger(__name__)

USB_PATH_PATTERN = re.compile(r"^.+-usb-.+$", re.IGNORECASE)


def format_size(size_bytes: int) -> str:
    """Human-readable size using binary units."""
    size = float(size_bytes)
    for unit in ['B', 'KiB', 'MiB', 'GiB', 'TiB']:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} PiB"


class SmartCapable:
    """Marker for device types that can be queried with smartctl.

    Such devices override StorageDevice.get_smart_device_type() when
    smartctl needs an explicit ``-d`` type.
    """


class StorageDevice:
    """Describes a block storage device.

    Values obtained from ``blockdev`` and sysfs are computed on first use
    and cached for the lifetime of the instance.
    """

    def __init__(
        self,
        device_file: str,
        run_cmd: Optional[Callable[[List[str]], List[str]]] = None,
        udev: Optional[UdevDevice] = None,
        sysfs_block_root: Optional[str] = None,
    ):
        self.device_file = device_file
        self.run_cmd = run_cmd or execute
        self.udev = udev or UdevDevice(device_file, run_cmd=self.run_cmd)
        self.sysfs_block_root = Path(sysfs_block_root or get_config().sysfs_block_root)

        self._size: Optional[int] = None
        self._block_size: Optional[int] = None
        self._sector_size: Optional[int] = None
        self._model: Optional[str] = None
        self._vendor: Optional[str] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.device_file!r})"

    # -----------------------------
    #  Identity
    # -----------------------------
    def get_device_name(self, canonical: bool = False) -> str:
        """Name of the device below /dev, in the form sysfs uses.

        With canonical=True, symlinks such as /dev/disk/by-id/... are
        resolved first. Slashes become '!' (cciss/c0d0 -> cciss!c0d0).
        """
        path = os.path.realpath(self.device_file) if canonical else self.device_file
        if path.startswith("/dev/"):
            name = path[len("/dev/"):]
        else:
            name = os.path.basename(path)
        return name.replace("/", "!")

    def exists(self) -> bool:
        """True if the device file exists and is a block device."""
        try:
            return stat.S_ISBLK(os.stat(self.device_file).st_mode)
        except OSError:
            return False

    def get_device_links(self) -> List[str]:
        links = self.udev.get_property("DEVLINKS")
        return links.split() if links else []

    def get_device_file_by_id(self) -> Optional[str]:
        for link in self.get_device_links():
            if link.startswith("/dev/disk/by-id/"):
                return link
        return None

    def get_preferred_device_file(self) -> str:
        """Stable by-id path when udev knows one, otherwise the device file."""
        return self.get_device_file_by_id() or self.device_file

    # -----------------------------
    #  blockdev queries
    # -----------------------------
    def get_size(self) -> int:
        """Size of the device in bytes."""
        if self._size is None:
            self._size = self._blockdev("--getsize64")
        return self._size

    def get_block_size(self) -> int:
        if self._block_size is None:
            self._block_size = self._blockdev("--getbsz")
        return self._block_size

    def get_sector_size(self) -> int:
        if self._sector_size is None:
            self._sector_size = self._blockdev("--getss")
        return self._sector_size

    # -----------------------------
    #  sysfs / udev attributes
    # -----------------------------
    def get_model(self) -> str:
        if self._model is None:
            self._model = self._read_sysfs("device/model")
        return self._model

    def get_vendor(self) -> str:
        if self._vendor is None:
            self._vendor = self._read_sysfs("device/vendor")
        return self._vendor

    def get_serial_number(self) -> str:
        serial = self.udev.get_property("ID_SERIAL_SHORT")
        if serial is None:
            return ""
        return serial.replace("_", " ")

    def get_wwn(self) -> str:
        return self.udev.get_property("ID_WWN", "")

    def get_description(self) -> str:
        """Short label such as 'WDC WD40EFRX [/dev/sda, 3.64 TiB]'."""
        model = self.get_model() or "n/a"
        return f"{model} [{self.device_file}, {format_size(self.get_size())}]"

    # -----------------------------
    #  Classification
    # -----------------------------
    def is_rotational(self) -> bool:
        """Whether the device is a spinning disk.

        Each source can only prove the device is not rotational; when none
        does, the device is assumed to rotate.
        """
        if self.udev.get_property("ID_SSD") == "1":
            return False
        if self.udev.get_property("ID_ATA_ROTATION_RATE_RPM") == "0":
            return False
        # SSDs do not implement Automatic Acoustic Management.
        if self.udev.get_property("ID_ATA_FEATURE_SET_AAM") == "0":
            return False
        if self._read_sysfs("queue/rotational") == "0":
            return False
        if "SSD" in self.get_model():
            return False
        return True

    def is_removable(self) -> bool:
        return self._read_sysfs("removable") == "1"

    def is_usb(self) -> bool:
        if self.udev.get_property("ID_BUS") == "usb":
            return True
        if self.udev.get_property("ID_USB_DRIVER") == "usb-storage":
            return True
        if self.udev.get_property("ID_DRIVE_THUMB") == "1":
            return True
        id_path = self.udev.get_property("ID_PATH")
        if id_path and USB_PATH_PATTERN.match(id_path):
            return True
        return False

    def is_ata(self) -> bool:
        return self.udev.get_property("ID_BUS") == "ata"

    def is_raid(self) -> bool:
        return False

    def is_read_only(self) -> bool:
        return False

    # -----------------------------
    #  S.M.A.R.T.
    # -----------------------------
    def has_smart_support(self) -> bool:
        return isinstance(self, SmartCapable)

    def assert_has_smart_support(self):
        if not self.has_smart_support():
            raise AssertionError(
                f"Device '{self.device_file}' does not support S.M.A.R.T."
            )

    def get_smart_device_type(self) -> str:
        return ""

    def to_info(self) -> DeviceInfo:
        """Snapshot every attribute into a DeviceInfo model."""
        return DeviceInfo.from_device(self)

    # -----------------------------
    #  Helpers
    # -----------------------------
    def _blockdev(self, flag: str) -> int:
        cmd = [get_config().blockdev_command, flag, self.device_file]
        output = self.run_cmd(cmd)
        value = output[0].strip() if output else ""
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(
                f"Unexpected output from '{' '.join(cmd)}': {value!r}"
            ) from e

    def _read_sysfs(self, attribute: str) -> str:
        path = self.sysfs_block_root / self.get_device_name(canonical=True) / attribute
        try:
            return path.read_text().strip()
        except FileNotFoundError:
            logger.debug(f"{path} not present, treating as absent")
            return ""
