#!/usr/bin/env python3
"""storagedev CLI - inspect block storage devices."""
from typing import Optional

import typer
from rich.console import Console

from storagedev import __version__
from storagedev.cli_device_commands import register_device_commands
from storagedev.core.logger import configure_logging, get_logger

app = typer.Typer(
    name="storagedev",
    help="""storagedev - describe block storage devices

Quick start:
  storagedev list               # All disks with size and type
  storagedev info /dev/sda      # Everything about one disk
  storagedev smart-check sda    # Can it be monitored?
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
):
    """Describe block storage devices."""
    if verbose or log_file:
        configure_logging(verbose=verbose, log_file=log_file)
        logger.debug(f"storagedev {__version__} starting")


@app.command()
def version():
    """Show storagedev version."""
    console.print(f"storagedev v{__version__}")


register_device_commands(app, console)

if __name__ == "__main__":
    app()
