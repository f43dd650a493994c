"""Config command - show and change where new canvases are created."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..errors import SettingsError
from ..settings import Location, load_settings, save_settings, settings_path


def run_config_show(vault_path: Path, *, output_json: bool = False) -> int:
    console = Console(stderr=True)
    try:
        settings = load_settings(vault_path)
    except SettingsError as e:
        console.print(f"Error: {e}", style="bold red")
        return 1

    if output_json:
        print(json.dumps(settings.to_dict(), indent=2))
        return 0

    table = Table(title="Link Exploder settings", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("new_file_location", settings.new_file_location.value)
    table.add_row("custom_file_location", settings.custom_file_location or "-")
    table.add_row("file", str(settings_path(vault_path)))
    Console().print(table)
    return 0


def run_config_set(vault_path: Path, *, location: str | None = None, folder: str | None = None) -> int:
    """Update stored settings; options left as None keep their value."""
    console = Console(stderr=True)
    try:
        settings = load_settings(vault_path)
        if location is not None:
            settings.new_file_location = Location(location)
        if folder is not None:
            settings.custom_file_location = folder.strip().strip("/")
    except (SettingsError, ValueError) as e:
        console.print(f"Error: {e}", style="bold red")
        return 1

    if settings.new_file_location is Location.SPECIFIED and not settings.custom_file_location:
        console.print("Warning: location is 'specified' but no folder is set; using the vault root", style="yellow")

    try:
        path = save_settings(vault_path, settings)
    except OSError as e:
        console.print(f"Error: {e}", style="bold red")
        return 1
    console.print(f"Wrote settings to {path}", style="green")
    return 0
