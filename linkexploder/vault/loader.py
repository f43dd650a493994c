"""Vault loading and link resolution."""

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path

import frontmatter

from ..models import Note
from .parser import extract_frontmatter_links, extract_links

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".md"


@dataclass
class Vault:
    """Container for all loaded notes and the other files they can link to."""

    path: Path
    notes: list[Note] = field(default_factory=list)
    files: list[str] = field(default_factory=list)  # every non-hidden file, vault-relative

    # Lookup tables built after loading
    _by_path: dict[str, str] = field(default_factory=dict)  # lowercased path -> path
    _by_filename: dict[str, list[str]] = field(default_factory=dict)  # lowercased filename -> paths
    _notes_by_path: dict[str, Note] = field(default_factory=dict)

    def __post_init__(self):
        self._build_lookups()

    def _build_lookups(self):
        """Build path and filename lookups."""
        self._by_path = {}
        self._by_filename = {}
        for rel in sorted(self.files, key=lambda p: (len(p), p)):
            self._by_path.setdefault(rel.lower(), rel)
            filename = posixpath.basename(rel).lower()
            self._by_filename.setdefault(filename, []).append(rel)
        self._notes_by_path = {note.path: note for note in self.notes}

    def note(self, path: str) -> Note | None:
        return self._notes_by_path.get(path)

    def find_note(self, name: str) -> Note | None:
        """Find a note by vault-relative path (with or without .md) or by name."""
        query = name.strip().replace("\\", "/").strip("/")
        if not query:
            return None

        for candidate in _with_note_extension(query):
            path = self._by_path.get(candidate.lower())
            if path and path in self._notes_by_path:
                return self._notes_by_path[path]

        lowered = query.lower()
        matches = sorted(
            (note for note in self.notes if note.name.lower() == lowered),
            key=lambda n: (len(n.path), n.path),
        )
        return matches[0] if matches else None

    def resolve(self, target: str, source: str | None = None) -> str | None:
        """Resolve a link target to a vault-relative file path.

        Tries, for `target` and `target.md`: the exact vault path, the path
        relative to the linking note's folder, then any file with a matching
        name or path suffix (shortest path wins).
        """
        target = target.strip().replace("\\", "/").lstrip("/")
        if not target:
            return None

        source_dir = posixpath.dirname(source) if source else ""
        for candidate in _with_note_extension(target):
            exact = self._by_path.get(candidate.lower())
            if exact:
                return exact

            if source_dir:
                relative = posixpath.normpath(posixpath.join(source_dir, candidate))
                found = self._by_path.get(relative.lower())
                if found:
                    return found

            found = self._match_by_name(candidate)
            if found:
                return found

        return None

    def _match_by_name(self, candidate: str) -> str | None:
        lowered = candidate.lower()
        paths = self._by_filename.get(posixpath.basename(lowered), [])
        if "/" not in lowered:
            return paths[0] if paths else None
        for path in paths:
            if path.lower().endswith("/" + lowered):
                return path
        return None


def _with_note_extension(target: str) -> list[str]:
    """Candidate file names for a link target."""
    if posixpath.splitext(target)[1]:
        return [target, target + NOTE_EXTENSION]
    return [target + NOTE_EXTENSION]


def is_hidden(rel: Path) -> bool:
    return any(part.startswith(".") for part in rel.parts)


def load_note(path: Path, vault_path: Path) -> Note:
    """Load a single markdown file and parse its frontmatter and links."""
    text = path.read_text(encoding="utf-8")
    rel = path.relative_to(vault_path).as_posix()

    try:
        post = frontmatter.loads(text)
        content, fm = post.content, dict(post.metadata)
    except Exception as e:
        logger.warning("Failed to parse frontmatter in %s: %s", rel, e)
        content, fm = text, {}

    links = extract_frontmatter_links(fm) + extract_links(content)

    return Note(
        path=rel,
        name=path.stem,
        content=content,
        frontmatter=fm,
        links=links,
    )


def load_vault(vault_path: Path) -> Vault:
    """Load all markdown notes from the vault.

    Args:
        vault_path: Path to the vault root

    Returns:
        Vault with notes sorted by path and every linkable file indexed
    """
    notes: list[Note] = []
    files: list[str] = []

    for file in sorted(vault_path.rglob("*")):
        rel = file.relative_to(vault_path)
        # Skip hidden files and directories (.obsidian, .trash, ...)
        if is_hidden(rel) or not file.is_file():
            continue
        files.append(rel.as_posix())

        if file.suffix.lower() != NOTE_EXTENSION:
            continue
        try:
            notes.append(load_note(file, vault_path))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to load %s: %s", rel.as_posix(), e)

    return Vault(path=vault_path, notes=notes, files=files)
