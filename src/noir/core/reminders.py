"""Reminder ledger: one review date per note, kept in reminders.json.

The whole ledger is a single JSON object ``{note_date: review_date}`` with
both sides in ``YYYY-MM-DD`` form. Every mutation reads the full document,
changes it, and writes it back, so mutations are serialized with a lock.
"""

import logging
from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path
from threading import Lock

from noir.core.config import UNTITLED_NOTE
from noir.core.documents import read_json_document, write_json_document
from noir.core.layout import month_prefix
from noir.core.types import DueReminder, ReminderAck, StoreError

logger = logging.getLogger(__name__)


class ReminderLedger:
    """Maps a note date to its next review date."""

    def __init__(self, path: Path, today: Callable[[], date] = date.today):
        """
        Initialize reminder ledger.

        Args:
            path: Path to reminders.json
            today: Clock returning the current local date
        """
        self.path = path
        self._today = today
        self._lock = Lock()

    def today(self) -> str:
        """Today's date as ``YYYY-MM-DD``."""
        return self._today().isoformat()

    def load(self) -> dict[str, str]:
        """Read the full ledger; empty on any read or parse failure."""
        data = read_json_document(self.path, dict, "reminders")
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            logger.error(f"Malformed reminders document at {self.path}, ignoring it")
            return {}
        return data

    def _save(self, reminders: dict[str, str]) -> bool:
        try:
            write_json_document(self.path, reminders)
        except OSError:
            logger.error("Error saving reminders to %s", self.path, exc_info=True)
            return False
        return True

    def set(self, note_date: str, delay_in_days: int) -> ReminderAck:
        """
        Schedule (or reschedule) the review of a note.

        Args:
            note_date: Key of the note to review
            delay_in_days: Days from today; 0 is due today, negative is overdue

        Returns:
            ReminderAck with the computed review date
        """
        try:
            review_date = (self._today() + timedelta(days=delay_in_days)).isoformat()
        except OverflowError:
            logger.warning(
                f"Reminder for {note_date} not set: {delay_in_days} days is out of range"
            )
            return ReminderAck(success=False, message="Review date is out of range")

        with self._lock:
            reminders = self.load()
            reminders[note_date] = review_date
            saved = self._save(reminders)

        if not saved:
            return ReminderAck(
                success=False,
                message="Failed to save reminder",
                review_date=review_date,
            )
        logger.info(f"Reminder for {note_date} set to {review_date}")
        return ReminderAck(success=True, message="Reminder set!", review_date=review_date)

    def delete(self, note_date: str) -> bool:
        """
        Remove the reminder for a note.

        Returns:
            True if a reminder was removed and the ledger persisted
        """
        with self._lock:
            reminders = self.load()
            if note_date not in reminders:
                return False
            del reminders[note_date]
            return self._save(reminders)

    def list_for_month(self, year: int, month0: int) -> dict[str, str]:
        """Reminders whose note date falls in the given 0-based month."""
        prefix = month_prefix(year, month0)
        return {
            note_date: review_date
            for note_date, review_date in self.load().items()
            if note_date.startswith(prefix)
        }

    def list_due(
        self, title_for: Callable[[str], str] | None = None
    ) -> list[DueReminder]:
        """
        List reminders due today or earlier.

        Args:
            title_for: Looks up a note title by date; titles fall back to
                "Untitled Note" when missing, empty or unreadable

        Returns:
            Due reminders in ledger order
        """
        today = self.today()
        due = []
        for note_date, review_date in self.load().items():
            # Fixed-width ISO dates compare correctly as strings
            if review_date > today:
                continue
            title = ""
            if title_for is not None:
                try:
                    title = title_for(note_date)
                except StoreError as e:
                    logger.warning(f"No title for due note {note_date}: {e}")
            due.append(
                DueReminder(
                    note_date=note_date,
                    review_date=review_date,
                    title=title or UNTITLED_NOTE,
                )
            )
        return due
