"""Note endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from noir.api.deps import CamelModel, StoreDep

router = APIRouter()


class NoteResponse(CamelModel):
    """A note and its content."""

    date_string: str
    content: str


class NoteTitleResponse(CamelModel):
    """Derived title of a note."""

    date_string: str
    title: str


class SaveNoteRequest(CamelModel):
    """Request to save a note."""

    content: str


@router.get("/notes", response_model=list[str])
def get_notes_for_month(
    store: StoreDep,
    year: int,
    month: Annotated[int, Query(ge=0, le=11, description="0-based month")],
) -> list[str]:
    """
    List the dates that have a note in the given month.

    Order is not guaranteed.
    """
    return store.get_notes_for_month(year, month)


# Declared before /notes/{date} so "all" is not taken as a date
@router.get("/notes/all", response_model=list[NoteResponse])
def get_all_notes(store: StoreDep) -> list[NoteResponse]:
    """
    Dump every note for client-side search.
    """
    return [
        NoteResponse(date_string=note.date_string, content=note.content)
        for note in store.get_all_notes()
    ]


@router.get("/notes/{date}", response_model=NoteResponse)
def load_note(date: str, store: StoreDep) -> NoteResponse:
    """
    Load a note. Content is empty when no note exists.
    """
    return NoteResponse(date_string=date, content=store.load_note(date))


@router.put("/notes/{date}", response_model=NoteResponse)
def save_note(date: str, request: SaveNoteRequest, store: StoreDep) -> NoteResponse:
    """
    Create or overwrite a note.
    """
    store.save_note(date, request.content)
    return NoteResponse(date_string=date, content=request.content)


@router.delete("/notes/{date}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(date: str, store: StoreDep) -> None:
    """
    Delete a note and its reminder.
    """
    store.delete_note(date)


@router.get("/notes/{date}/title", response_model=NoteTitleResponse)
def get_note_title(date: str, store: StoreDep) -> NoteTitleResponse:
    """
    Get the title derived from a note's first non-blank line.
    """
    return NoteTitleResponse(date_string=date, title=store.get_note_title(date))
