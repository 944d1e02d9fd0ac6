"""Data directory layout and path helpers.

Everything Noir persists lives under one per-user data directory:

    <data-dir>/notes/<YYYY-MM-DD>.md
    <data-dir>/images/<uuid>.<ext>
    <data-dir>/settings.json
    <data-dir>/reminders.json
"""

from dataclasses import dataclass
from pathlib import Path

NOTES_DIRNAME = "notes"
IMAGES_DIRNAME = "images"
SETTINGS_FILENAME = "settings.json"
REMINDERS_FILENAME = "reminders.json"
NOTE_SUFFIX = ".md"


@dataclass(frozen=True)
class DataLayout:
    """Resolved paths for a single data directory."""

    root: Path

    @classmethod
    def at(cls, path: Path | str) -> "DataLayout":
        """Build a layout rooted at ``path`` (``~`` is expanded)."""
        return cls(Path(path).expanduser().resolve())

    @property
    def notes_dir(self) -> Path:
        return self.root / NOTES_DIRNAME

    @property
    def images_dir(self) -> Path:
        return self.root / IMAGES_DIRNAME

    @property
    def settings_file(self) -> Path:
        return self.root / SETTINGS_FILENAME

    @property
    def reminders_file(self) -> Path:
        return self.root / REMINDERS_FILENAME

    def note_path(self, date_string: str) -> Path:
        """
        Get the file path for the note keyed by ``date_string``.

        Args:
            date_string: Note key, normally ``YYYY-MM-DD``

        Returns:
            Path to the markdown file (may not exist)
        """
        return self.notes_dir / f"{date_string}{NOTE_SUFFIX}"

    def ensure(self) -> None:
        """
        Ensure the data directory structure exists.

        Safe to call multiple times.
        """
        self.root.mkdir(parents=True, exist_ok=True)
        self.notes_dir.mkdir(parents=True, exist_ok=True)
        self.images_dir.mkdir(parents=True, exist_ok=True)


def month_prefix(year: int, month0: int) -> str:
    """
    Build the ``YYYY-MM`` key prefix for a 0-based month.

    Args:
        year: Calendar year
        month0: Month index, 0 for January

    Returns:
        Zero-padded prefix, e.g. ``2024-05`` for ``(2024, 4)``
    """
    return f"{year}-{month0 + 1:02d}"
