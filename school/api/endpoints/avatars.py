"""Avatar endpoints: upload, preview, full-size download and paginated listing."""

from typing import List

from fastapi import APIRouter, Depends, File, Path, Query, Response, UploadFile
from fastapi.responses import StreamingResponse

from school.dependencies import get_avatar_service
from school.schemas import (
    DB_INT_MAX,
    DB_INT_MIN,
    AvatarInfoResponse,
    AvatarPageResponse,
    AvatarPreviewResponse,
)
from school.services.avatar_service import AvatarService
from school.services.storage_service import LocalStorageService

router = APIRouter()

DEFAULT_MEDIA_TYPE = "application/octet-stream"


@router.post("/{student_id}/upload", response_model=AvatarInfoResponse)
async def upload_avatar(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    file: UploadFile = File(None),
    service: AvatarService = Depends(get_avatar_service),
):
    """
    Upload (or replace) a student's avatar.

    - Saves the original as `{studentId}_{name}_full.{ext}` in the avatars directory
    - Stores a 100px-wide preview in the database
    """
    content = await file.read() if file is not None else None
    return await service.upload(
        student_id,
        content,
        file.filename if file is not None else None,
        file.content_type if file is not None else None,
    )


@router.get("/all", response_model=AvatarPageResponse)
async def list_avatars(
    page: int = Query(1, description="Page number, starting at 1", le=DB_INT_MAX),
    size: int = Query(10, description="Items per page", le=DB_INT_MAX),
    service: AvatarService = Depends(get_avatar_service),
):
    """Paginated avatars with their previews."""
    return await service.list_page(page, size)


@router.get("/all-list", response_model=List[AvatarPreviewResponse])
async def list_all_avatars(service: AvatarService = Depends(get_avatar_service)):
    """Every avatar with its preview, unpaginated."""
    return await service.list_all()


@router.get("/{student_id}/preview-info", response_model=AvatarInfoResponse)
async def avatar_preview_info(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: AvatarService = Depends(get_avatar_service),
):
    """Avatar metadata: file path, size and media type."""
    return await service.get_info(student_id)


@router.get("/{student_id}/preview-data")
async def avatar_preview_data(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: AvatarService = Depends(get_avatar_service),
):
    """Raw preview image bytes."""
    avatar = await service.get_preview(student_id)
    return Response(
        content=avatar.data,
        media_type=avatar.media_type or DEFAULT_MEDIA_TYPE,
        headers={"Content-Disposition": "inline; filename=preview"},
    )


@router.get("/{student_id}/full")
async def avatar_full(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: AvatarService = Depends(get_avatar_service),
):
    """Stream the full-size original from disk."""
    handle, info = await service.open_full(student_id)
    return StreamingResponse(
        LocalStorageService.iter_chunks(handle),
        media_type=info.media_type or DEFAULT_MEDIA_TYPE,
    )
