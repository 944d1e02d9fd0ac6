"""Whole-document JSON helpers shared by the settings and reminder stores.

Both documents are small and are always read in full and rewritten in full.
Reads never raise: a missing, unreadable or unparsable file yields the
caller's default.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_json_document(path: Path, default: Callable[[], T], label: str) -> Any | T:
    """
    Read a JSON document, falling back to a default.

    Args:
        path: Document path
        default: Factory for the fallback value
        label: Human-readable document name for log messages

    Returns:
        Parsed JSON, or ``default()`` on any read/parse failure
    """
    if not path.exists():
        logger.debug(f"No {label} file at {path}")
        return default()

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError:
        logger.error("Error reading %s from %s", label, path, exc_info=True)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.error(f"Invalid JSON in {label} file {path}: {e}")
    return default()


def write_json_document(path: Path, data: Any) -> None:
    """
    Write a JSON document in full (2-space indented).

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
