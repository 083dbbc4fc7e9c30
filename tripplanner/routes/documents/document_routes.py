from fastapi import APIRouter, Depends, File, Form, Path, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from urllib.parse import quote

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer
from tripplanner.models.documents.document import DocumentCategory
from tripplanner.models.user.user import User
from tripplanner.schemas.documents.document import DocumentCreate, DocumentResponse, DocumentUpdate
from tripplanner.services.documents.document_service import (
    create_document, delete_document, document_service, download_document, upload_document,
)
from tripplanner.utils.storage import get_storage

router = APIRouter(tags=["Documents"])


def _split_tags(tags: Optional[str]) -> List[str]:
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


@router.get("/trips/{trip_id}/documents", response_model=List[DocumentResponse])
async def list_documents(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await document_service.list_for_trip(db, access.trip.id)


@router.post("/trips/{trip_id}/documents", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def register_document(
    data: DocumentCreate,
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db)
):
    """Register a document whose file is already in storage."""
    return await create_document(db, access, data)


@router.post("/trips/{trip_id}/documents/upload", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_trip_document(
    file: UploadFile = File(...),
    name: Optional[str] = Form(None),
    category: DocumentCategory = Form(DocumentCategory.other),
    tags: Optional[str] = Form(None, description="Comma separated"),
    notes: Optional[str] = Form(None),
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db),
    storage=Depends(get_storage)
):
    return await upload_document(db, access, file, storage, name, category, _split_tags(tags), notes)


@router.put("/documents/{document_id}", response_model=DocumentResponse)
async def update_document(
    data: DocumentUpdate,
    document_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await document_service.update(db, current_user, document_id, data)


@router.delete("/documents/{document_id}")
async def remove_document(
    document_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage=Depends(get_storage)
):
    return await delete_document(db, current_user, document_id, storage)


@router.get("/documents/{document_id}/download")
async def download(
    document_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage=Depends(get_storage)
):
    document, content = await download_document(db, current_user, document_id, storage)
    return Response(
        content=content,
        media_type=document.mime_type or "application/octet-stream",
        headers={"Content-Disposition": f'inline; filename="{quote(document.name)}"'},
    )
