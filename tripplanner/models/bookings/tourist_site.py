from sqlalchemy import Column, String, Date, Text
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import PricedBookingMixin

class TouristSite(PricedBookingMixin, Base):
    __tablename__ = "tourist_sites"

    name = Column(String, nullable=False)
    address = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    opening_hours = Column(Text, nullable=True)
    planned_visit_date = Column(Date, nullable=True)
    planned_visit_time = Column(String(5), nullable=True)
    website = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
