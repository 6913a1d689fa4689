"""udev property lookup for block devices."""
from typing import Callable, Dict, List, Optional

from storagedev.core.config import get_config
from storagedev.core.logger import get_logger
from storagedev.core.process import ExecutionError, execute

logger = get_logger(__name__)


class UdevDevice:
    """Property view of a device as reported by ``udevadm info``.

    Properties are fetched once on first access and kept for the lifetime
    of the instance.
    """

    def __init__(self, device_file: str, run_cmd: Optional[Callable[[List[str]], List[str]]] = None):
        self.device_file = device_file
        self.run_cmd = run_cmd or execute
        self._properties: Optional[Dict[str, str]] = None

    @property
    def properties(self) -> Dict[str, str]:
        if self._properties is None:
            self._properties = self._query()
        return self._properties

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)

    def _query(self) -> Dict[str, str]:
        cmd = [
            get_config().udevadm_command,
            "info",
            "--query=property",
            f"--name={self.device_file}",
        ]
        try:
            lines = self.run_cmd(cmd)
        except ExecutionError as e:
            logger.warning(f"No udev properties for {self.device_file}: {e}")
            return {}
        return parse_properties(lines)


def parse_properties(lines: List[str]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines; lines without '=' are ignored."""
    properties: Dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line or "=" not in line:
            continue
        key, value = line.split("=", 1)
        properties[key.strip()] = value.strip()
    return properties
