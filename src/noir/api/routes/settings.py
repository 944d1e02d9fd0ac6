"""User settings endpoints."""

from typing import Any

from fastapi import APIRouter

from noir.api.deps import StoreDep
from noir.core.types import Settings

router = APIRouter()


@router.get("/settings")
def get_settings(store: StoreDep) -> dict[str, Any]:
    """
    Get the current settings (defaults when none are saved).
    """
    return store.get_settings().to_document()


@router.put("/settings")
def save_settings(settings: Settings, store: StoreDep) -> dict[str, Any]:
    """
    Replace the settings document.

    Unknown keys are stored as given.
    """
    store.save_settings(settings)
    return settings.to_document()
