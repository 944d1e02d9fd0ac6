"""Noir - local-first dated notes with review reminders."""

__version__ = "1.0.0"
