from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint
from tripplanner.core.database import Base
from tripplanner.utils.time_format import utc_now

class Traveler(Base):
    __tablename__ = "travelers"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    identifier = Column(String(50), nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utc_now)

    __table_args__ = (
        UniqueConstraint("trip_id", "identifier", name="uq_trip_traveler_identifier"),
    )
