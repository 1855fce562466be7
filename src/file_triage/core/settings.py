"""Options for the local filesystem adapter, saved as JSON.

Usage:
    settings = TriageSettings.load(get_default_settings_path())
    storage = LocalStorage.from_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


def get_default_settings_path() -> Path:
    """Get the default path for the settings file.

    Returns:
        Path to the settings JSON file in the user's home directory.
    """
    return Path.home() / ".file-triage" / "settings.json"


@dataclass(frozen=True)
class TriageSettings:
    """Adapter options.

    Attributes:
        skip_hidden: Leave dot-files and dot-folders out of listings.
        create_missing_parents: Create missing destination folders on move.
    """

    skip_hidden: bool = False
    create_missing_parents: bool = False

    @classmethod
    def load(cls, settings_file: Path) -> TriageSettings:
        """Read settings from a JSON file.

        Missing or unreadable files give the defaults. Unknown keys and
        non-boolean values are ignored.

        Args:
            settings_file: Path to the JSON file.

        Returns:
            Loaded settings.
        """
        if not settings_file.exists():
            return cls()

        try:
            saved = json.loads(settings_file.read_text(encoding="utf-8"))
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable settings file {settings_file}: {e}")
            return cls()

        if not isinstance(saved, dict):
            logger.warning(f"Ignoring settings file {settings_file}: expected a JSON object")
            return cls()

        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in saved.items() if key in known and isinstance(value, bool)})

    def save(self, settings_file: Path) -> None:
        """Write settings to a JSON file, creating parent folders."""
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        settings_file.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")
