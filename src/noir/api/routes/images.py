"""Pasted image endpoints."""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

from noir.api.deps import CamelModel, StoreDep

router = APIRouter()


class SavedImageResponse(CamelModel):
    """Result of saving a pasted image; fileName is null on failure."""

    file_name: str | None


class ImagesPathResponse(CamelModel):
    """Image storage root."""

    path: str


@router.post("/images", response_model=SavedImageResponse)
async def save_pasted_image(request: Request, store: StoreDep) -> SavedImageResponse:
    """
    Save the raw request body as an image.

    The file extension comes from the Content-Type header.
    """
    buffer = await request.body()
    mime_type = request.headers.get("content-type", "")
    return SavedImageResponse(file_name=store.save_pasted_image(buffer, mime_type))


@router.get("/images/path", response_model=ImagesPathResponse)
def get_images_path(store: StoreDep) -> ImagesPathResponse:
    """
    Get the directory images are stored in.
    """
    return ImagesPathResponse(path=str(store.get_images_path()))


@router.get("/images/{file_name}")
def get_image(file_name: str, store: StoreDep) -> FileResponse:
    """
    Serve a stored image.
    """
    path = store.images.open(file_name)
    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Image not found: {file_name}",
        )
    return FileResponse(path)
