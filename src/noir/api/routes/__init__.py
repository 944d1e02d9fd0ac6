"""API route modules."""

from noir.api.routes import capture, health, images, notes, reminders, settings

__all__ = ["capture", "health", "images", "notes", "reminders", "settings"]
