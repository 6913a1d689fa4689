"""Device-type specific descriptors."""
from storagedev.models.device import SmartCapable, StorageDevice


class ScsiStorageDevice(SmartCapable, StorageDevice):
    """SCSI/SATA/SAS disks and USB mass storage (sdX)."""

    def get_smart_device_type(self) -> str:
        # USB bridges need SCSI-to-ATA translation for smartctl.
        if self.is_usb():
            return "sat"
        return ""


class IdeStorageDevice(SmartCapable, StorageDevice):
    """Legacy IDE disks (hdX)."""

    def is_ata(self) -> bool:
        return True


class NvmeStorageDevice(SmartCapable, StorageDevice):
    """NVMe namespaces (nvmeXnY)."""

    def is_rotational(self) -> bool:
        return False

    def get_smart_device_type(self) -> str:
        return "nvme"


class SoftwareRaidDevice(StorageDevice):
    """Linux MD arrays (mdX)."""

    def get_model(self) -> str:
        return "Software RAID"

    def is_rotational(self) -> bool:
        return False

    def is_raid(self) -> bool:
        return True


class OpticalDevice(StorageDevice):
    """CD/DVD/BD drives (srX)."""

    def is_removable(self) -> bool:
        return True

    def is_read_only(self) -> bool:
        return True


class MmcStorageDevice(StorageDevice):
    """SD/MMC cards and eMMC (mmcblkX)."""

    def is_rotational(self) -> bool:
        return False


class VirtioStorageDevice(StorageDevice):
    """Paravirtualized disks (vdX)."""

    def get_vendor(self) -> str:
        return super().get_vendor() or "VirtIO"
