from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from tripplanner.models.documents.document import DocumentCategory


class DocumentCreate(BaseModel):
    """Metadata for a file that is already in storage."""
    name: str = Field(..., min_length=1, max_length=255)
    category: DocumentCategory = DocumentCategory.other
    file_url: str = Field(..., min_length=1)
    file_key: str = Field(..., min_length=1, max_length=500)
    mime_type: Optional[str] = Field(None, max_length=100)
    tags: List[str] = []
    notes: Optional[str] = None


class DocumentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[DocumentCategory] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None


class DocumentResponse(BaseModel):
    id: int
    trip_id: int
    name: str
    category: DocumentCategory
    file_url: str
    file_key: str
    mime_type: Optional[str] = None
    tags: List[str] = []
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
