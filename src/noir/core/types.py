"""Shared types and data structures for Noir."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from noir.core.config import DEFAULT_QUIZ_PROMPT


class StoreError(Exception):
    """Raised when the store cannot complete a write the caller must know about."""

    pass


class NoteStoreError(StoreError):
    """Raised when a note file cannot be read, written or removed."""

    pass


class FontSize(StrEnum):
    """Editor font sizes."""

    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"


class FontFamily(StrEnum):
    """Editor font families."""

    MONO = "mono"
    SANS = "sans"
    SERIF = "serif"


class Settings(BaseModel):
    """User settings persisted as settings.json.

    Keys are stored in camelCase. Unknown keys are kept so that documents
    written by newer versions round-trip untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        use_enum_values=True,
    )

    api_key: str = ""
    quiz_prompt: str = DEFAULT_QUIZ_PROMPT
    font_size: FontSize = FontSize.BASE
    font_family: FontFamily = FontFamily.MONO

    def to_document(self) -> dict:
        """Serialize to the on-disk JSON shape."""
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class NoteEntry:
    """A stored note and its full content."""

    date_string: str
    content: str


@dataclass(frozen=True)
class DueReminder:
    """A reminder whose review date has arrived."""

    note_date: str
    review_date: str
    title: str


@dataclass(frozen=True)
class ReminderAck:
    """Acknowledgement returned when a reminder is set."""

    success: bool
    message: str
    review_date: str = ""
