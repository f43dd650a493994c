"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from linkexploder.vault.loader import Vault, load_vault


@pytest.fixture
def vault_path(tmp_path: Path) -> Path:
    """An empty vault root (a folder holding .obsidian)."""
    root = tmp_path / "vault"
    (root / ".obsidian").mkdir(parents=True)
    return root


@pytest.fixture
def write_note(vault_path: Path) -> Callable[..., Path]:
    """Write a note into the vault: write_note("folder/name.md", "body", tags=[...])."""

    def _write(rel: str, body: str = "", **frontmatter) -> Path:
        path = vault_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = []
        if frontmatter:
            lines.append("---")
            for key, value in frontmatter.items():
                if isinstance(value, list):
                    lines.append(f"{key}:")
                    lines.extend(f'  - "{item}"' for item in value)
                else:
                    lines.append(f'{key}: "{value}"')
            lines.append("---")
            lines.append("")
        lines.append(body)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def linked_vault(vault_path: Path, write_note) -> Vault:
    """Small vault: hub -> (alpha, beta), alpha -> beta, beta -> gamma, fan -> hub."""
    write_note("hub.md", "# Hub\n\nSee [[alpha]] and [[projects/beta|Beta]].")
    write_note("alpha.md", "Alpha points at [[beta]].")
    write_note("projects/beta.md", "Beta leads to [gamma](../gamma.md).")
    write_note("gamma.md", "Nothing here.")
    write_note("fan.md", "I like [[Hub]].")
    return load_vault(vault_path)
