"""Settings store backed by settings.json."""

import logging
from pathlib import Path

from pydantic import ValidationError

from noir.core.documents import read_json_document, write_json_document
from noir.core.types import Settings, StoreError

logger = logging.getLogger(__name__)


class SettingsStore:
    """Loads and saves the user settings document."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> Settings:
        """
        Load settings, falling back to defaults.

        A missing, unreadable, unparsable or invalid document yields the
        default settings. Failures are logged, never raised.
        """
        data = read_json_document(self.path, dict, "settings")
        if not isinstance(data, dict):
            logger.error(
                f"Settings must be a JSON object, got {type(data).__name__}"
            )
            return Settings()
        try:
            return Settings.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid settings in {self.path}: {e}")
            return Settings()

    def save(self, settings: Settings) -> None:
        """
        Write the full settings document.

        Raises:
            StoreError: If the document cannot be written
        """
        try:
            write_json_document(self.path, settings.to_document())
        except OSError as e:
            logger.error(f"Failed to save settings to {self.path}: {e}")
            raise StoreError(f"Failed to save settings: {e}") from e
        logger.info("Settings saved")
