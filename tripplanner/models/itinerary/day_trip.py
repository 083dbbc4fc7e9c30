from sqlalchemy import Column, String, DateTime, Text, JSON
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import TripChildMixin

class DayTrip(TripChildMixin, Base):
    __tablename__ = "day_trips"

    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    start_location = Column(Text, nullable=False)
    end_location = Column(Text, nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    stops = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=True)
