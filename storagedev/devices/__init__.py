"""Device-type descriptors and the factory that selects them."""
from storagedev.devices.registry import find_device_type, get_storage_device, register_device_type
from storagedev.devices.types import (
    IdeStorageDevice,
    MmcStorageDevice,
    NvmeStorageDevice,
    OpticalDevice,
    ScsiStorageDevice,
    SoftwareRaidDevice,
    VirtioStorageDevice,
)

__all__ = [
    'get_storage_device',
    'find_device_type',
    'register_device_type',
    'IdeStorageDevice',
    'MmcStorageDevice',
    'NvmeStorageDevice',
    'OpticalDevice',
    'ScsiStorageDevice',
    'SoftwareRaidDevice',
    'VirtioStorageDevice',
]
