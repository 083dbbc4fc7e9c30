from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from tripplanner.models.trips.checklist_models import ChecklistCategory


class ChecklistBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: ChecklistCategory = ChecklistCategory.other
    due_date: Optional[date] = None
    notes: Optional[str] = None
    owner: str = Field("shared", min_length=1, max_length=50)


class ChecklistCreate(ChecklistBase):
    completed: bool = False


class ChecklistUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[ChecklistCategory] = None
    completed: Optional[bool] = None
    due_date: Optional[date] = None
    notes: Optional[str] = None
    owner: Optional[str] = Field(None, min_length=1, max_length=50)


class ChecklistResponse(ChecklistBase):
    id: int
    trip_id: int
    completed: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ChecklistProgress(BaseModel):
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_percentage: float
    tasks_by_category: dict[str, dict[str, int]]
    tasks_by_owner: dict[str, dict[str, int]]
