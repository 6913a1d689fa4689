"""Shared test fixtures for storagedev tests."""
import pytest

from storagedev.core.config import set_config
from storagedev.core.logger import configure_logging
from storagedev.core.process import ExecutionError


class FakeRunner:
    """Stands in for storagedev.core.process.execute.

    blockdev answers come from ``blockdev`` (flag -> value); a missing flag
    fails like the real tool. udevadm returns ``udev`` as KEY=VALUE lines,
    or fails when ``udev`` is None.
    """

    def __init__(self, blockdev=None, udev=None):
        self.blockdev = blockdev or {}
        self.udev = udev
        self.calls = []

    def __call__(self, cmd):
        self.calls.append(list(cmd))
        if cmd[0] == "udevadm":
            if self.udev is None:
                raise ExecutionError(cmd, 4, "Unknown device")
            return [f"{key}={value}" for key, value in self.udev.items()]
        if cmd[0] == "blockdev":
            flag = cmd[1]
            if flag not in self.blockdev:
                raise ExecutionError(cmd, 1, f"blockdev: cannot open {cmd[-1]}")
            return [f"{self.blockdev[flag]}\n"]
        raise ExecutionError(cmd, 127, "command not found")

    def count(self, program, flag=None):
        return sum(
            1 for call in self.calls
            if call[0] == program and (flag is None or call[1] == flag)
        )


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from default configuration."""
    for var in (
        "STORAGEDEV_SYSFS_BLOCK_ROOT",
        "STORAGEDEV_BLOCKDEV_COMMAND",
        "STORAGEDEV_UDEVADM_COMMAND",
        "STORAGEDEV_COMMAND_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)
    configure_logging()


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def sysfs_root(tmp_path):
    """Empty fake /sys/block directory."""
    root = tmp_path / "sys" / "block"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def add_sysfs_device(sysfs_root):
    """Create a device entry in the fake sysfs tree.

    Keyword arguments map attribute paths (with '__' for '/') to contents,
    e.g. device__model="WDC WD40EFRX" writes device/model.
    """
    def _add(name, **attributes):
        entry = sysfs_root / name
        entry.mkdir(parents=True, exist_ok=True)
        for key, value in attributes.items():
            path = entry / key.replace("__", "/")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"{value}\n")
        return entry
    return _add
