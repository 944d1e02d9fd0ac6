"""Review reminder endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from noir.api.deps import CamelModel, StoreDep

router = APIRouter()


class SetReminderRequest(CamelModel):
    """Request to schedule a note review."""

    delay_in_days: int


class ReminderAckResponse(CamelModel):
    """Result of scheduling a review."""

    success: bool
    message: str
    review_date: str


class DueReminderResponse(CamelModel):
    """A reminder whose review date has arrived."""

    note_date: str
    review_date: str
    title: str


@router.get("/reminders", response_model=dict[str, str])
def get_reminders_for_month(
    store: StoreDep,
    year: int,
    month: Annotated[int, Query(ge=0, le=11, description="0-based month")],
) -> dict[str, str]:
    """
    Map of note date to review date for notes in the given month.
    """
    return store.get_reminders_for_month(year, month)


@router.get("/reminders/due", response_model=list[DueReminderResponse])
def get_due_reminders(store: StoreDep) -> list[DueReminderResponse]:
    """
    List reminders due today or earlier, with note titles.
    """
    return [
        DueReminderResponse(
            note_date=reminder.note_date,
            review_date=reminder.review_date,
            title=reminder.title,
        )
        for reminder in store.get_due_reminders()
    ]


@router.put("/reminders/{date}", response_model=ReminderAckResponse)
def set_reminder(
    date: str, request: SetReminderRequest, store: StoreDep
) -> ReminderAckResponse:
    """
    Schedule a review of the note in ``delayInDays`` days.

    Setting a reminder again replaces the previous review date.
    """
    ack = store.set_reminder(date, request.delay_in_days)
    return ReminderAckResponse(
        success=ack.success, message=ack.message, review_date=ack.review_date
    )


@router.delete("/reminders/{date}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reminder(date: str, store: StoreDep) -> None:
    """
    Remove the reminder for a note, if any.
    """
    store.delete_reminder(date)
