"""Block device discovery."""
from storagedev.discovery.scanner import StorageDiscovery

__all__ = ['StorageDiscovery']
