"""Logging for storagedev.

Handlers live on the ``storagedev`` package logger only; module loggers
carry no level of their own and inherit from it, so configure_logging()
controls every module at once.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "storagedev"
DEFAULT_LOG_FILE = Path("/var/log/storagedev/storagedev.log")
FALLBACK_LOG_FILE = Path("/tmp/storagedev.log")

# stdout belongs to command output (tables, JSON, YAML)
console = Console(stderr=True)

_console_handler: Optional[RichHandler] = None
_file_handler: Optional[logging.FileHandler] = None


def _package_logger() -> logging.Logger:
    global _console_handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _console_handler is None:
        _console_handler = RichHandler(console=console, show_path=False, level=logging.WARNING)
        _console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(_console_handler)
        logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger whose level and handlers come from the package logger."""
    _package_logger()
    return logging.getLogger(name)


def _open_log_file(path: Path) -> logging.FileHandler:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path)
    except PermissionError:
        return logging.FileHandler(FALLBACK_LOG_FILE)


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> Optional[Path]:
    """Apply CLI logging options to the package logger.

    Args:
        verbose: Log debug records (command executions) to console and file
        log_file: Write records to this file. Verbose runs without one use
            /var/log/storagedev/storagedev.log, or /tmp/storagedev.log when
            that location cannot be written.

    Returns:
        Path of the active log file, or None when file logging is off.
        Calling again replaces the previous file handler.
    """
    global _file_handler

    logger = _package_logger()
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    _console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    if not (verbose or log_file):
        return None

    _file_handler = _open_log_file(Path(log_file) if log_file else DEFAULT_LOG_FILE)
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(_file_handler)

    path = Path(_file_handler.baseFilename)
    logger.info(f"storagedev logging to {path}")
    return path
