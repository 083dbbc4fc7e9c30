from sqlalchemy import Column, String, Date, Text
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import PricedBookingMixin

class Hotel(PricedBookingMixin, Base):
    __tablename__ = "hotels"

    name = Column(String, nullable=False)
    address = Column(Text, nullable=True)
    check_in_date = Column(Date, nullable=False)
    check_in_time = Column(String(5), nullable=True)
    check_out_date = Column(Date, nullable=False)
    check_out_time = Column(String(5), nullable=True)
    confirmation_number = Column(String(100), nullable=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(500), nullable=True)
    category = Column(String(50), nullable=True)
    cover_image = Column(Text, nullable=True)
    parking_image = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
