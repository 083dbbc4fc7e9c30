from sqlalchemy import Column, String, Date, Text, Enum
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import PricedBookingMixin
import enum

class TransportType(str, enum.Enum):
    flight = "flight"
    train = "train"
    bus = "bus"
    ferry = "ferry"
    car_rental = "car_rental"
    other = "other"

class Transportation(PricedBookingMixin, Base):
    __tablename__ = "transportation"

    type = Column(Enum(TransportType), nullable=False)
    flight_number = Column(String(50), nullable=True)
    origin = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    departure_date = Column(Date, nullable=False)
    departure_time = Column(String(5), nullable=True)
    arrival_date = Column(Date, nullable=True)
    arrival_time = Column(String(5), nullable=True)
    confirmation_number = Column(String(100), nullable=True)
    website = Column(String(500), nullable=True)

    # Only filled for car journeys
    company = Column(String(255), nullable=True)
    car_model = Column(String(255), nullable=True)
    pickup_location = Column(Text, nullable=True)
    return_location = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)

    notes = Column(Text, nullable=True)
