from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from tripplanner.core.database import Base
from tripplanner.utils.time_format import utc_now

class ActivityLog(Base):
    """Append-only audit trail of changes made inside a trip."""
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    action = Column(String(20), nullable=False)  # created, updated, deleted
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(Integer, nullable=True)
    entity_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    user = relationship("User")

    __table_args__ = (
        Index("ix_activity_log_trip_created", "trip_id", "created_at"),
    )
