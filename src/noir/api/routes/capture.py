"""Captured text side channel.

The hotkey helper POSTs clipboard text; the UI long-polls GET /capture and
receives each capture once.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from noir.api.deps import CamelModel, StoreDep

router = APIRouter()

MAX_CAPTURE_WAIT_SECONDS = 30.0


class CaptureRequest(CamelModel):
    """Text captured by the global hotkey."""

    text: str


class CapturePublished(CamelModel):
    """Whether the capture was published (empty text is ignored)."""

    published: bool


class CaptureResponse(CamelModel):
    """Captured text delivered to the UI."""

    text: str


@router.post("/capture", response_model=CapturePublished)
def publish_capture(request: CaptureRequest, store: StoreDep) -> CapturePublished:
    """
    Publish captured text to the UI.
    """
    return CapturePublished(published=store.capture.publish(request.text))


@router.get(
    "/capture",
    response_model=CaptureResponse,
    responses={204: {"description": "Nothing captured before the timeout"}},
)
def take_capture(
    store: StoreDep,
    timeout: Annotated[
        float, Query(ge=0, le=MAX_CAPTURE_WAIT_SECONDS, description="Seconds to wait")
    ] = 0,
) -> CaptureResponse | Response:
    """
    Take the next captured text, waiting up to ``timeout`` seconds.
    """
    text = store.capture.take(timeout=timeout)
    if text is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return CaptureResponse(text=text)
