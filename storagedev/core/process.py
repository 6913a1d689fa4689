"""External command execution."""
import subprocess
from typing import List, Optional, Sequence

from storagedev.core.config import get_config
from storagedev.core.logger import get_logger

logger = get_logger(__name__)


class ExecutionError(Exception):
    """Raised when an external command fails to run or exits non-zero."""

    def __init__(self, cmd: Sequence[str], exit_code: int, output: str = ""):
        self.cmd = list(cmd)
        self.exit_code = exit_code
        self.output = output.strip()
        message = f"Failed to execute command '{' '.join(self.cmd)}' (exit code {exit_code})"
        if self.output:
            message += f": {self.output}"
        super().__init__(message)


def execute(cmd: Sequence[str], timeout: Optional[int] = None) -> List[str]:
    """Run a command and return its stdout split into lines.

    Args:
        cmd: Argument vector, e.g. ['blockdev', '--getsize64', '/dev/sda']
        timeout: Seconds before giving up (defaults to the configured command_timeout)

    Raises:
        ExecutionError: On non-zero exit, missing binary or timeout
    """
    if timeout is None:
        timeout = get_config().command_timeout

    logger.debug(f"Executing: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            list(cmd), capture_output=True, text=True, check=True, timeout=timeout
        )
    except subprocess.CalledProcessError as e:
        raise ExecutionError(cmd, e.returncode, e.stderr or e.stdout or "") from e
    except FileNotFoundError as e:
        raise ExecutionError(cmd, 127, str(e)) from e
    except subprocess.TimeoutExpired as e:
        raise ExecutionError(cmd, -1, f"timed out after {timeout}s") from e

    return result.stdout.splitlines()
