"""FastAPI dependencies for the Noir API."""

from typing import Annotated

from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from noir.core.store import NoteStore


async def get_store(request: Request) -> NoteStore:
    """
    Get the note store served by this application.

    Returns:
        NoteStore instance
    """
    return request.app.state.store


# Type alias for dependency injection
StoreDep = Annotated[NoteStore, Depends(get_store)]


class CamelModel(BaseModel):
    """Request/response model using camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
