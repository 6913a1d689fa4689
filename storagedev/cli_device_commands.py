"""Device inspection CLI commands - list, info, smart-check."""
import json

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from storagedev.cli_support import handle_cli_error, print_error, print_success, print_warning, yes_no
from storagedev.core.logger import get_logger
from storagedev.core.process import ExecutionError
from storagedev.devices import get_storage_device
from storagedev.discovery import StorageDiscovery
from storagedev.models.device import format_size

logger = get_logger(__name__)

# Module-level console instance (will be set by register function)
console: Console = Console()


def _render(data, json_output: bool) -> str:
    if json_output:
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False)


def list_devices(
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
    yaml_output: bool = typer.Option(False, "--yaml", help="Emit YAML instead of a table"),
):
    """List block storage devices found in sysfs."""
    discovery = StorageDiscovery()
    devices = discovery.discover_devices()

    if not devices:
        print_warning(console, "No storage devices found")
        return

    infos = []
    skipped = []
    for device in devices:
        try:
            infos.append(device.to_info())
        except ExecutionError as e:
            # Empty optical drives and card readers fail blockdev queries
            logger.warning(f"Skipping {device.device_file}: {e}")
            skipped.append(device.device_file)

    if json_output or yaml_output:
        typer.echo(_render([info.summary() for info in infos], json_output))
        return

    table = Table(title="💾 Storage Devices", show_header=True)
    table.add_column("Device", style="cyan")
    table.add_column("Model")
    table.add_column("Size", style="blue")
    table.add_column("Type")
    table.add_column("USB")
    table.add_column("SMART")

    for info in infos:
        if info.raid:
            kind = "RAID"
        elif info.rotational:
            kind = "HDD"
        else:
            kind = "SSD"
        table.add_row(
            info.device_file,
            escape(info.model) or "[dim]n/a[/dim]",
            format_size(info.size),
            kind,
            yes_no(info.usb),
            yes_no(info.smart_support),
        )

    console.print(table)
    for device_file in skipped:
        print_warning(console, f"{escape(device_file)} skipped: no readable medium or size")


def info(
    device: str = typer.Argument(..., help="Device file or name, e.g. /dev/sda or sda"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON"),
    yaml_output: bool = typer.Option(False, "--yaml", help="Emit YAML"),
):
    """Show everything known about a single device."""
    storage_device = get_storage_device(device)

    try:
        details = storage_device.to_info()
    except ExecutionError as e:
        handle_cli_error(e, console)

    if json_output or yaml_output:
        typer.echo(_render(details.model_dump(), json_output))
        return

    lines = [
        f"[bold]Model:[/bold] {escape(details.model) or 'n/a'}",
        f"[bold]Vendor:[/bold] {escape(details.vendor) or 'n/a'}",
        f"[bold]Serial:[/bold] {escape(details.serial_number) or 'n/a'}",
        f"[bold]Size:[/bold] {format_size(details.size)} ({details.size} bytes)",
        f"[bold]Block size:[/bold] {details.block_size}",
        f"[bold]Sector size:[/bold] {details.sector_size}",
        f"[bold]Rotational:[/bold] {yes_no(details.rotational)}",
        f"[bold]Removable:[/bold] {yes_no(details.removable)}",
        f"[bold]USB:[/bold] {yes_no(details.usb)}",
        f"[bold]ATA:[/bold] {yes_no(details.ata)}",
        f"[bold]RAID:[/bold] {yes_no(details.raid)}",
        f"[bold]Read-only:[/bold] {yes_no(details.read_only)}",
        f"[bold]S.M.A.R.T.:[/bold] {yes_no(details.smart_support)}",
    ]
    if details.device_file_by_id:
        lines.append(f"[bold]By-id:[/bold] {escape(details.device_file_by_id)}")

    console.print(Panel(
        "\n".join(lines),
        title=f"💾 {escape(details.device_file)}",
        border_style="blue"
    ))


def smart_check(
    device: str = typer.Argument(..., help="Device file or name, e.g. /dev/sda or sda"),
):
    """Check whether a device can be monitored with S.M.A.R.T."""
    storage_device = get_storage_device(device)

    try:
        storage_device.assert_has_smart_support()
    except AssertionError as e:
        print_error(console, escape(str(e)))
        raise typer.Exit(1)

    device_type = storage_device.get_smart_device_type()
    suffix = f" (smartctl -d {device_type})" if device_type else ""
    print_success(console, f"{escape(storage_device.device_file)} supports S.M.A.R.T.{suffix}")


def register_device_commands(app: typer.Typer, shared_console: Console):
    """Register device commands with the main Typer app."""
    global console
    console = shared_console

    app.command("list")(list_devices)
    app.command()(info)
    app.command("smart-check")(smart_check)
