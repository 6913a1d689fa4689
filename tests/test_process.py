"""Tests for external command execution."""
import subprocess

import pytest

from storagedev.core.config import StorageConfig, set_config
from storagedev.core.process import ExecutionError, execute


def test_execute_returns_lines(monkeypatch):
    captured = {}

    def fake_run(cmd, **kwargs):
        captured['cmd'] = cmd
        captured['kwargs'] = kwargs
        return subprocess.CompletedProcess(cmd, 0, stdout="500107862016\n", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert execute(("blockdev", "--getsize64", "/dev/sda")) == ["500107862016"]
    assert captured['cmd'] == ["blockdev", "--getsize64", "/dev/sda"]
    assert captured['kwargs']['check'] is True
    assert captured['kwargs']['capture_output'] is True
    assert captured['kwargs']['timeout'] == 10


def test_execute_uses_configured_timeout(monkeypatch):
    captured = {}

    def fake_run(cmd, **kwargs):
        captured['timeout'] = kwargs['timeout']
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    set_config(StorageConfig(command_timeout=3))

    assert execute(["true"]) == []
    assert captured['timeout'] == 3


def test_non_zero_exit(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd, output="", stderr="blockdev: cannot open /dev/sdz: No such file\n")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(ExecutionError) as exc_info:
        execute(["blockdev", "--getsize64", "/dev/sdz"])

    error = exc_info.value
    assert error.exit_code == 1
    assert error.cmd == ["blockdev", "--getsize64", "/dev/sdz"]
    assert error.output == "blockdev: cannot open /dev/sdz: No such file"
    assert "exit code 1" in str(error)


def test_missing_binary(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(ExecutionError) as exc_info:
        execute(["blockdev", "--getss", "/dev/sda"])

    assert exc_info.value.exit_code == 127


def test_timeout(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs['timeout'])

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(ExecutionError, match="timed out after 5s"):
        execute(["udevadm", "info"], timeout=5)
