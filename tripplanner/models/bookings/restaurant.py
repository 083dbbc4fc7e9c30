from sqlalchemy import Column, String, Date, Integer, Text
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import PricedBookingMixin

class Restaurant(PricedBookingMixin, Base):
    __tablename__ = "restaurants"

    name = Column(String, nullable=False)
    address = Column(Text, nullable=True)
    cuisine_type = Column(String(100), nullable=True)
    reservation_date = Column(Date, nullable=True)
    reservation_time = Column(String(5), nullable=True)
    number_of_diners = Column(Integer, nullable=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
