from sqlalchemy import Column, Integer, String, Date, Numeric, Text, Enum, Index
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import TripChildMixin
import enum

class ActivityType(str, enum.Enum):
    hotel = "hotel"
    transportation = "transportation"
    car_rental = "car_rental"
    restaurant = "restaurant"
    tourist_site = "tourist_site"
    other = "other"

class PaymentMethod(str, enum.Enum):
    credit_card = "credit_card"
    debit_card = "debit_card"
    cash = "cash"
    bank_transfer = "bank_transfer"
    paypal = "paypal"
    other = "other"

class Payment(TripChildMixin, Base):
    __tablename__ = "payments"

    # Polymorphic reference: (activity_type, activity_id) points into one of the booking tables
    activity_type = Column(Enum(ActivityType), nullable=False)
    activity_id = Column(Integer, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    payment_date = Column(Date, nullable=False)
    payment_method = Column(Enum(PaymentMethod), nullable=False, default=PaymentMethod.credit_card)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        Index("ix_payments_activity", "activity_type", "activity_id"),
    )
