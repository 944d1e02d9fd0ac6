"""Image blob store for pasted images."""

import logging
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)


class ImageStore:
    """Writes pasted images under freshly generated unique names.

    Images are immutable once written and are never deleted here; notes
    reference them by file name.
    """

    def __init__(self, root: Path):
        self._root = root

    @property
    def root(self) -> Path:
        """Image storage root."""
        return self._root

    def resolve_path(self, file_name: str) -> Path:
        """Absolute path of a stored image (no I/O)."""
        return self._root / file_name

    def save(self, buffer: bytes, mime_type: str) -> str | None:
        """
        Persist an image payload.

        Args:
            buffer: Raw image bytes
            mime_type: Declared media type, e.g. ``image/png``

        Returns:
            Generated file name, or None if the image could not be saved
        """
        _, _, extension = mime_type.partition("/")
        if not extension:
            logger.error(f"Failed to save image: no subtype in media type {mime_type!r}")
            return None

        file_name = f"{uuid.uuid4()}.{extension}"
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            self.resolve_path(file_name).write_bytes(bytes(buffer))
        except OSError:
            logger.error("Failed to save image %s", file_name, exc_info=True)
            return None

        logger.debug(f"Saved image {file_name} ({len(buffer)} bytes)")
        return file_name

    def open(self, file_name: str) -> Path | None:
        """
        Locate a stored image for serving.

        Returns:
            Path to the image, or None if it does not exist or is outside
            the image root
        """
        path = self.resolve_path(file_name).resolve()
        if path.parent != self._root.resolve() or not path.is_file():
            return None
        return path
