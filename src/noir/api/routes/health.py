"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter

from noir.api.deps import StoreDep

router = APIRouter()


@router.get("/health")
def health_check(store: StoreDep) -> dict[str, Any]:
    """
    Check that the data directory is usable.

    Returns:
        dict with status and component health details
    """
    layout = store.layout
    components = {
        "notes": layout.notes_dir.is_dir(),
        "images": layout.images_dir.is_dir(),
    }
    all_healthy = all(components.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "dataDir": str(layout.root),
        "components": {name: {"healthy": ok} for name, ok in components.items()},
    }
