"""Where new canvas files go.

Settings live in the vault at `.linkexploder/settings.yml`:

    new_file_location: specified   # vault | same | specified
    custom_file_location: canvases/links
"""

import logging
import posixpath
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import yaml

from .errors import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_DIR = ".linkexploder"
SETTINGS_FILE = "settings.yml"


class Location(str, Enum):
    """Folder a new canvas is created in."""

    VAULT = "vault"  # vault root
    SAME = "same"  # folder of the focus note
    SPECIFIED = "specified"  # custom_file_location


@dataclass
class Settings:
    new_file_location: Location = Location.VAULT
    custom_file_location: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        raw_location = data.get("new_file_location") or Location.VAULT.value
        try:
            location = Location(str(raw_location).strip().lower())
        except ValueError:
            choices = ", ".join(loc.value for loc in Location)
            raise SettingsError(f"Unknown new_file_location {raw_location!r} (expected one of: {choices})") from None

        custom = data.get("custom_file_location") or ""
        if not isinstance(custom, str):
            raise SettingsError("custom_file_location must be a string")
        return cls(new_file_location=location, custom_file_location=custom)

    def to_dict(self) -> dict:
        return {
            "new_file_location": self.new_file_location.value,
            "custom_file_location": self.custom_file_location,
        }


def settings_path(vault_path: Path) -> Path:
    return vault_path / SETTINGS_DIR / SETTINGS_FILE


def load_settings(vault_path: Path) -> Settings:
    """Read settings from the vault; a missing file means defaults."""
    path = settings_path(vault_path)
    if not path.exists():
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Cannot parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"{path} must contain a mapping")
    return Settings.from_dict(data)


def save_settings(vault_path: Path, settings: Settings) -> Path:
    path = settings_path(vault_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(settings.to_dict(), sort_keys=False), encoding="utf-8")
    logger.debug("saved settings to %s", path)
    return path


def target_location(settings: Settings, focus_path: str) -> str:
    """Vault-relative folder for a canvas about the note at `focus_path`."""
    if settings.new_file_location is Location.SAME:
        return posixpath.dirname(focus_path)
    if settings.new_file_location is Location.SPECIFIED:
        return settings.custom_file_location.strip().strip("/")
    return ""
