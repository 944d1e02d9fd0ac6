"""Configuration management for Noir core."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Noir Data Directory (per-user, defaults to ~/.noir)
NOIR_DATA_DIR = Path(
    get_env("NOIR_DATA_DIR", os.path.expanduser("~/.noir"))
    or os.path.expanduser("~/.noir")
)

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO")

# API Server settings
NOIR_API_KEY = get_env("NOIR_API_KEY")
NOIR_HOST = get_env("NOIR_HOST", "127.0.0.1")
NOIR_PORT = get_env_int("NOIR_PORT", 8470)
NOIR_CORS_ORIGINS = [
    origin.strip()
    for origin in (
        get_env("NOIR_CORS_ORIGINS", "http://localhost:3000")
        or "http://localhost:3000"
    ).split(",")
    if origin.strip()
]

# Captured text waiting for a consumer before the oldest is dropped
CAPTURE_BACKLOG = get_env_int("NOIR_CAPTURE_BACKLOG", 32)

# Fallback title for due reminders whose note has no usable title
UNTITLED_NOTE = "Untitled Note"

DEFAULT_QUIZ_PROMPT = """You are an AI that transforms raw daily notes into active recall questions in the style of Anki flashcards.
Rules:
- Output questions and answers in separate sections (in order 1, 2, 3...) so that answers can't be seen directly when self quizzing.
- Extract key concepts, people, places, dates, numbers, cause/effect, or definitions from the notes.
- Phrase each as a clear, focused recall question (avoid yes/no, avoid giving away context in the question).
- Use formats like: "What...", "Who...", "When...", "Where...", "Why...", "How..."
- Keep each question short, unambiguous, and memory-focused.
- Output as a simple bulleted list."""


def setup_logging() -> logging.Logger:
    """Configure and return logger."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, (LOG_LEVEL or "INFO").upper(), logging.INFO),
    )
    return logging.getLogger(__name__)
