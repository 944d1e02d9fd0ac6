"""The note store: notes, reminders, images, settings and capture in one place.

Both the API server and the CLI should call build_store() to get a store
wired to the configured data directory.
"""

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

from noir.core.capture import CaptureChannel
from noir.core.config import NOIR_DATA_DIR
from noir.core.images import ImageStore
from noir.core.layout import DataLayout
from noir.core.notes import NoteRepository
from noir.core.reminders import ReminderLedger
from noir.core.settings import SettingsStore
from noir.core.types import DueReminder, NoteEntry, ReminderAck, Settings

logger = logging.getLogger(__name__)


class NoteStore:
    """Request-level operations over one data directory."""

    def __init__(
        self,
        data_dir: Path | str,
        today: Callable[[], date] = date.today,
        capture: CaptureChannel | None = None,
    ):
        """
        Initialize the store and create its directories.

        Args:
            data_dir: Root of the per-user data directory
            today: Clock used for reminder scheduling
            capture: Channel for captured text (a private one by default)
        """
        self.layout = DataLayout.at(data_dir)
        self.layout.ensure()

        self.settings = SettingsStore(self.layout.settings_file)
        self.reminders = ReminderLedger(self.layout.reminders_file, today=today)
        self.notes = NoteRepository(self.layout, reminders=self.reminders)
        self.images = ImageStore(self.layout.images_dir)
        self.capture = capture or CaptureChannel()

    # --- Settings ---

    def get_settings(self) -> Settings:
        return self.settings.load()

    def save_settings(self, settings: Settings) -> None:
        self.settings.save(settings)

    # --- Notes ---

    def load_note(self, date_string: str) -> str:
        return self.notes.load(date_string)

    def save_note(self, date_string: str, content: str) -> None:
        self.notes.save(date_string, content)

    def delete_note(self, date_string: str) -> None:
        self.notes.delete(date_string)

    def get_notes_for_month(self, year: int, month: int) -> list[str]:
        """Note keys for a 0-based month."""
        return self.notes.list_for_month(year, month)

    def get_note_title(self, date_string: str) -> str:
        return self.notes.title_for(date_string)

    def get_all_notes(self) -> list[NoteEntry]:
        return self.notes.list_all()

    # --- Reminders ---

    def set_reminder(self, note_date: str, delay_in_days: int) -> ReminderAck:
        return self.reminders.set(note_date, delay_in_days)

    def get_reminders_for_month(self, year: int, month: int) -> dict[str, str]:
        """Reminders for notes in a 0-based month."""
        return self.reminders.list_for_month(year, month)

    def delete_reminder(self, note_date: str) -> None:
        self.reminders.delete(note_date)

    def get_due_reminders(self) -> list[DueReminder]:
        return self.reminders.list_due(self.notes.title_for)

    # --- Images ---

    def save_pasted_image(self, buffer: bytes, mime_type: str) -> str | None:
        return self.images.save(buffer, mime_type)

    def get_images_path(self) -> Path:
        return self.images.root

    def __repr__(self) -> str:
        return f"NoteStore({self.layout.root})"


def build_store(data_dir: Path | str | None = None) -> NoteStore:
    """
    Build a NoteStore for the configured data directory.

    Args:
        data_dir: Data directory (defaults to NOIR_DATA_DIR)

    Returns:
        Ready-to-use NoteStore
    """
    actual_data_dir = Path(data_dir) if data_dir else NOIR_DATA_DIR
    store = NoteStore(actual_data_dir)
    logger.info(f"Note store ready at {store.layout.root}")
    return store
