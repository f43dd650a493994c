"""File access for writing canvases into a vault."""

import logging
from pathlib import Path

import click

logger = logging.getLogger(__name__)


class VaultStorage:
    """
    Vault-relative file operations used when saving a canvas.

    Paths handed to `exists` and `create` are vault-relative POSIX strings,
    e.g. "canvases/note.canvas". `create` returns the absolute Path, which
    `open` accepts.
    """

    def __init__(self, vault_path: Path):
        self.vault_path = vault_path

    def resolve(self, path: str) -> Path:
        return self.vault_path.joinpath(*path.split("/"))

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def create(self, path: str, content: str) -> Path:
        """Write a new file, creating folders as needed.

        Raises FileExistsError rather than overwrite a file that appeared
        after the existence check.
        """
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("x", encoding="utf-8") as f:
            f.write(content)
        logger.debug("wrote %d characters to %s", len(content), target)
        return target

    def open(self, file: Path) -> None:
        """Show the file in the default application."""
        click.launch(str(file))
