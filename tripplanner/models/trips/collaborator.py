from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from tripplanner.core.database import Base
from tripplanner.utils.time_format import utc_now
import enum
import sqlalchemy as sa

class CollaboratorPermission(str, enum.Enum):
    view_only = "view_only"
    can_edit = "can_edit"


class TripCollaborator(Base):
    __tablename__ = "trip_collaborators"

    id = Column(Integer, primary_key=True, index=True)

    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    permission_enum = sa.Enum(
        CollaboratorPermission,
        name="collaboratorpermission",
        values_callable=lambda obj: [e.value for e in obj]
    )
    permission = Column(permission_enum, nullable=False, default=CollaboratorPermission.can_edit)

    invited_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=utc_now)
    last_seen = Column(DateTime, nullable=True)
    visit_count = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("trip_id", "user_id", name="uq_trip_collaborator"),
    )

    trip = relationship("Trip", back_populates="collaborators")
    user = relationship("User", back_populates="collaborations", foreign_keys=[user_id])
