"""Canvas command - build a canvas from a note's links."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from ..canvas.builder import build_canvas, layout_canvas, serialize_canvas
from ..errors import LinkExploderError, NoteNotFoundError
from ..settings import load_settings, target_location
from ..vault.graph import build_link_index
from ..vault.loader import load_vault
from ..vault.storage import VaultStorage

logger = logging.getLogger(__name__)


def run_canvas(
    vault_path: Path,
    note: str,
    *,
    folder: str | None = None,
    open_file: bool = True,
    dry_run: bool = False,
) -> int:
    """Create a canvas of the note's outgoing and incoming links.

    Args:
        vault_path: Path to the vault root
        note: Note name or vault-relative path
        folder: Vault-relative folder overriding the configured location
        open_file: Open the canvas once written
        dry_run: Print the canvas JSON instead of writing it

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    console = Console(stderr=True)

    try:
        vault = load_vault(vault_path)
        focus_note = vault.find_note(note)
        if focus_note is None:
            raise NoteNotFoundError(f"note '{note}' not found")
        focus = focus_note.focus

        links = build_link_index(vault)
        logger.debug("link index: %d notes", len(links))

        if dry_run:
            print(serialize_canvas(layout_canvas(focus.path, links)))
            return 0

        if folder is None:
            folder = target_location(load_settings(vault_path), focus.path)

        storage = VaultStorage(vault_path)
        created = build_canvas(
            focus,
            links,
            exists=storage.exists,
            create=storage.create,
            open_file=storage.open if open_file else _skip_open,
            target_location=folder,
        )
    except (LinkExploderError, OSError) as e:
        console.print(f"Error: {e}", style="bold red")
        return 1

    console.print(f"Created canvas {created.relative_to(vault_path).as_posix()}", style="green")
    return 0


def _skip_open(file: Path) -> None:
    logger.debug("not opening %s", file)
