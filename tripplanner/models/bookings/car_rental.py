from sqlalchemy import Column, String, Date, Text
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import PricedBookingMixin

class CarRental(PricedBookingMixin, Base):
    __tablename__ = "car_rentals"

    company = Column(String, nullable=False)
    car_model = Column(String, nullable=True)
    pickup_date = Column(Date, nullable=False)
    pickup_time = Column(String(5), nullable=True)
    return_date = Column(Date, nullable=False)
    return_time = Column(String(5), nullable=True)
    pickup_location = Column(Text, nullable=True)
    return_location = Column(Text, nullable=True)
    confirmation_number = Column(String(100), nullable=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
