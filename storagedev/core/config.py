"""storagedev runtime configuration."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class StorageConfig:
    """Runtime configuration for device queries.

    Attributes:
        sysfs_block_root: Directory holding one entry per block device (default: /sys/block)
        blockdev_command: Binary used for size queries (default: blockdev)
        udevadm_command: Binary used for udev property lookups (default: udevadm)
        command_timeout: Timeout in seconds for external commands (default: 10)
    """

    sysfs_block_root: str = "/sys/block"
    blockdev_command: str = "blockdev"
    udevadm_command: str = "udevadm"
    command_timeout: int = 10

    @classmethod
    def from_env(cls) -> "StorageConfig":
        """Create config from STORAGEDEV_* environment variables."""
        return cls(
            sysfs_block_root=os.getenv("STORAGEDEV_SYSFS_BLOCK_ROOT", cls.sysfs_block_root),
            blockdev_command=os.getenv("STORAGEDEV_BLOCKDEV_COMMAND", cls.blockdev_command),
            udevadm_command=os.getenv("STORAGEDEV_UDEVADM_COMMAND", cls.udevadm_command),
            command_timeout=int(
                os.getenv("STORAGEDEV_COMMAND_TIMEOUT", cls.command_timeout)
            ),
        )


_config: Optional[StorageConfig] = None


def get_config() -> StorageConfig:
    """Get the global configuration, creating it from the environment if unset."""
    global _config
    if _config is None:
        _config = StorageConfig.from_env()
    return _config


def set_config(config: Optional[StorageConfig]):
    """Set the global configuration.

    Passing None makes the next get_config() call re-read the environment.
    """
    global _config
    _config = config
