"""Shared test fixtures and configuration."""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from noir.api.app import create_app
from noir.core.store import NoteStore

# Fixed "today" so reminder dates are predictable
TODAY = date(2024, 5, 10)


@pytest.fixture
def data_dir(tmp_path):
    """Provide an empty data directory."""
    return tmp_path / "noir-data"


@pytest.fixture
def store(data_dir):
    """Create a NoteStore whose clock is pinned to TODAY."""
    return NoteStore(data_dir, today=lambda: TODAY)


@pytest.fixture
def client(store):
    """API client without authentication."""
    return TestClient(create_app(store, api_key=""))


@pytest.fixture
def sample_notes():
    """Sample notes spread over several months."""
    return {
        "2024-04-30": "# April wrap-up\nDone.",
        "2024-05-01": "# Trip\nPacked bags",
        "2024-05-17": "\n\nJust text",
        "2024-06-01": "## June\n",
        "2023-05-02": "Last year",
    }


@pytest.fixture
def png_bytes():
    """Minimal PNG signature plus payload."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00\x01\x02fake-image" * 10
