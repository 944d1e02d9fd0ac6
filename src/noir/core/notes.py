"""Note repository: one markdown file per calendar date."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from noir.core.layout import NOTE_SUFFIX, DataLayout, month_prefix
from noir.core.types import NoteEntry, NoteStoreError

if TYPE_CHECKING:
    from noir.core.reminders import ReminderLedger

logger = logging.getLogger(__name__)

_HEADING_PREFIX = re.compile(r"^#+\s*")


def derive_title(content: str) -> str:
    """
    Derive a note title from its markdown content.

    The title is the first non-blank line with any markdown heading
    prefix removed.

    Args:
        content: Markdown note content

    Returns:
        Title text, or '' when the content has no non-blank line
    """
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped:
            return _HEADING_PREFIX.sub("", stripped).strip()
    return ""


def _read(path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


class NoteRepository:
    """Maps a date key to a markdown document on disk."""

    def __init__(self, layout: DataLayout, reminders: ReminderLedger | None = None):
        """
        Initialize note repository.

        Args:
            layout: Data directory layout
            reminders: Ledger cleaned up when a note is deleted
        """
        self.layout = layout
        self.reminders = reminders

    def load(self, date_string: str) -> str:
        """Return the note content, or '' if no note exists for the date."""
        path = self.layout.note_path(date_string)
        try:
            return _read(path)
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read note {date_string}: {e}")
            raise NoteStoreError(f"Failed to read note {date_string}: {e}") from e

    def save(self, date_string: str, content: str) -> None:
        """Create or overwrite the note with exactly ``content``."""
        path = self.layout.note_path(date_string)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps line endings byte-for-byte
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to save note {date_string}: {e}")
            raise NoteStoreError(f"Failed to save note {date_string}: {e}") from e
        logger.debug(f"Saved note {date_string} ({len(content)} chars)")

    def delete(self, date_string: str) -> None:
        """
        Delete the note and any reminder keyed by the same date.

        Deleting a missing note is a no-op. Reminder cleanup is best-effort
        and is not transactional with the file removal.
        """
        path = self.layout.note_path(date_string)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to delete note {date_string}: {e}")
            raise NoteStoreError(f"Failed to delete note {date_string}: {e}") from e

        if self.reminders is not None:
            self.reminders.delete(date_string)

    def list_for_month(self, year: int, month0: int) -> list[str]:
        """
        List the date keys of notes in a month.

        Args:
            year: Calendar year
            month0: 0-based month index

        Returns:
            Date keys in filesystem listing order
        """
        prefix = month_prefix(year, month0)
        return [
            path.stem
            for path in self._iter_note_files()
            if path.stem.startswith(prefix)
        ]

    def title_for(self, date_string: str) -> str:
        """Return the derived title, or '' if no note exists."""
        return derive_title(self.load(date_string))

    def list_all(self) -> list[NoteEntry]:
        """Dump every stored note for client-side search."""
        notes = []
        for path in self._iter_note_files():
            try:
                content = _read(path)
            except FileNotFoundError:
                # Removed between listing and reading
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read note {path.stem}: {e}")
                raise NoteStoreError(f"Failed to read note {path.stem}: {e}") from e
            notes.append(NoteEntry(date_string=path.stem, content=content))
        return notes

    def _iter_note_files(self):
        notes_dir = self.layout.notes_dir
        if not notes_dir.exists():
            return []
        try:
            return [
                path
                for path in notes_dir.iterdir()
                if path.suffix == NOTE_SUFFIX and path.is_file()
            ]
        except OSError as e:
            logger.error(f"Failed to list notes in {notes_dir}: {e}")
            raise NoteStoreError(f"Failed to list notes: {e}") from e
