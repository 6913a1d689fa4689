"""Data models for storagedev."""
from storagedev.models.info import DeviceInfo
from storagedev.models.device import SmartCapable, StorageDevice, format_size

__all__ = [
    'DeviceInfo',
    'SmartCapable',
    'StorageDevice',
    'format_size',
]
