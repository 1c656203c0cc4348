"""
Helpers for reading multipart uploads into storage-ready files.
"""

from fastapi import HTTPException, UploadFile, status
from typing import List, Sequence

from config import settings
from services.storage import MediaFile


def _too_large(file: UploadFile) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"File too large: {file.filename}. Maximum size: {settings.MAX_FILE_SIZE // (1024*1024)}MB"
    )


async def read_upload(file: UploadFile) -> MediaFile:
    """
    Read an uploaded file, enforcing the size limit.

    Raises:
        HTTPException: If the file is empty or too large
    """
    # Reject on the declared size before buffering the body
    if file.size is not None and file.size > settings.MAX_FILE_SIZE:
        raise _too_large(file)

    content = await file.read()
    if len(content) > settings.MAX_FILE_SIZE:
        raise _too_large(file)
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Empty file: {file.filename}"
        )
    return MediaFile(
        filename=file.filename or "file",
        content=content,
        content_type=file.content_type or "application/octet-stream",
    )


async def read_uploads(files: Sequence[UploadFile]) -> List[MediaFile]:
    return [await read_upload(f) for f in files]
