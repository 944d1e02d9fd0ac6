"""Capture channel for text grabbed by the global hotkey.

The hotkey glue publishes the clipboard text; the UI takes it. Each
capture is handed to exactly one consumer.
"""

import logging
import queue

from noir.core.config import CAPTURE_BACKLOG

logger = logging.getLogger(__name__)


class CaptureChannel:
    """Bounded hand-off of captured text between publisher and consumer."""

    def __init__(self, backlog: int = CAPTURE_BACKLOG):
        self._queue: queue.Queue[str] = queue.Queue(maxsize=max(backlog, 1))

    def publish(self, text: str) -> bool:
        """
        Publish captured text verbatim.

        Returns:
            False if the text was empty and nothing was published
        """
        if not text:
            return False
        while True:
            try:
                self._queue.put_nowait(text)
                return True
            except queue.Full:
                try:
                    dropped = self._queue.get_nowait()
                except queue.Empty:
                    continue
                logger.warning(
                    f"Capture backlog full, dropped {len(dropped)} chars of older text"
                )

    def take(self, timeout: float | None = None) -> str | None:
        """
        Take the next captured text.

        Args:
            timeout: Seconds to wait; None or 0 returns immediately

        Returns:
            Captured text, or None if nothing arrived in time
        """
        try:
            if not timeout:
                return self._queue.get_nowait()
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def pending(self) -> int:
        """Approximate number of undelivered captures."""
        return self._queue.qsize()
