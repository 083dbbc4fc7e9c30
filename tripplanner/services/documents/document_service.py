from fastapi import HTTPException, UploadFile, status
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from tripplanner.core.logger import logger
from tripplanner.dependencies.trip_access import TripAccess, ensure_can_write
from tripplanner.models import CarRental, Hotel, Restaurant, TouristSite, Transportation
from tripplanner.models.documents.document import Document, DocumentCategory
from tripplanner.models.user.user import User
from tripplanner.schemas.documents.document import DocumentCreate
from tripplanner.services.trips.trip_child_service import TripChildService
from tripplanner.utils.storage import (
    ALLOWED_DOCUMENT_TYPES, StorageError, random_suffix, read_upload, safe_filename,
)

LINKABLE_MODELS = (Hotel, Transportation, CarRental, Restaurant, TouristSite)

document_service = TripChildService(
    Document, "document", "Document",
    order_by=(Document.created_at.desc(), Document.id.desc()),
)


def document_key_prefix(access: TripAccess) -> str:
    return f"documents/{access.user.id}/{access.trip.id}/"


async def create_document(db: AsyncSession, access: TripAccess, data: DocumentCreate) -> Document:
    """Register metadata for a file the caller already stored under their own trip prefix."""
    prefix = document_key_prefix(access)
    if not data.file_key.startswith(prefix) or ".." in data.file_key.split("/"):
        logger.warning(f"Rejected document key {data.file_key!r} for trip {access.trip.id} by user {access.user.id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"file_key must start with {prefix}"
        )
    return await document_service.create(db, access, data)


async def upload_document(
    db: AsyncSession,
    access: TripAccess,
    file: UploadFile,
    storage,
    name: Optional[str] = None,
    category: DocumentCategory = DocumentCategory.other,
    tags: Optional[List[str]] = None,
    notes: Optional[str] = None,
) -> Document:
    """Store the file, then create the document row pointing at it."""
    ensure_can_write(access)
    data, content_type = await read_upload(file, ALLOWED_DOCUMENT_TYPES)

    filename = safe_filename(file.filename)
    file_key = f"{document_key_prefix(access)}{random_suffix()}-{filename}"
    try:
        url = await storage.put(file_key, data, content_type)
    except StorageError as e:
        logger.error(f"Document upload failed for trip {access.trip.id}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to store document")

    metadata = DocumentCreate(
        name=name or file.filename or filename,
        category=category,
        file_url=url,
        file_key=file_key,
        mime_type=content_type,
        tags=tags or [],
        notes=notes,
    )
    return await document_service.create(db, access, metadata)


async def delete_document(db: AsyncSession, user: User, document_id: int, storage) -> dict:
    document, _ = await document_service.get_with_access(db, user, document_id, write=True)
    file_key = document.file_key

    for model in LINKABLE_MODELS:
        await db.execute(
            update(model).where(model.linked_document_id == document.id).values(linked_document_id=None)
        )
    result = await document_service.delete(db, user, document_id)

    # The row is gone either way; a leftover object is only logged
    try:
        await storage.delete(file_key)
    except StorageError as e:
        logger.warning(f"Could not remove stored file {file_key}: {e}")
    return result


async def download_document(db: AsyncSession, user: User, document_id: int, storage) -> tuple:
    """Return ``(document, bytes)`` for a document the user can read."""
    document, _ = await document_service.get_with_access(db, user, document_id)
    try:
        content = await storage.get(document.file_key)
    except StorageError as e:
        logger.error(f"Download of document {document_id} failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to fetch file from storage")
    return document, content
