from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Date, Boolean, Text, Enum, Index
from tripplanner.core.database import Base
from tripplanner.utils.time_format import utc_now
import enum

class ChecklistCategory(str, enum.Enum):
    documents = "documents"
    bookings = "bookings"
    packing = "packing"
    health = "health"
    finance = "finance"
    other = "other"

class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    category = Column(Enum(ChecklistCategory), nullable=False, default=ChecklistCategory.other)
    completed = Column(Boolean, nullable=False, default=False)
    due_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    # Traveler identifier ("shared", "father", "mother", ...), free text
    owner = Column(String(50), nullable=False, default="shared")
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index("ix_checklist_items_trip_id", "trip_id"),
        Index("ix_checklist_items_category", "category"),
    )
