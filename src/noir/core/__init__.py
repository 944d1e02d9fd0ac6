"""Noir core library - the note and reminder store."""

from noir.core.capture import CaptureChannel
from noir.core.images import ImageStore
from noir.core.layout import DataLayout
from noir.core.notes import NoteRepository, derive_title
from noir.core.reminders import ReminderLedger
from noir.core.settings import SettingsStore
from noir.core.store import NoteStore, build_store
from noir.core.types import (
    DueReminder,
    FontFamily,
    FontSize,
    NoteEntry,
    NoteStoreError,
    ReminderAck,
    Settings,
    StoreError,
)

__all__ = [
    # Store
    "NoteStore",
    "build_store",
    # Components
    "CaptureChannel",
    "DataLayout",
    "ImageStore",
    "NoteRepository",
    "ReminderLedger",
    "SettingsStore",
    "derive_title",
    # Types
    "DueReminder",
    "FontFamily",
    "FontSize",
    "NoteEntry",
    "ReminderAck",
    "Settings",
    # Errors
    "NoteStoreError",
    "StoreError",
]
