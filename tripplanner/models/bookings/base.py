from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Numeric, Enum
from sqlalchemy.orm import declared_attr
from tripplanner.utils.time_format import utc_now
import enum

class PaymentStatus(str, enum.Enum):
    pending = "pending"
    paid = "paid"


class TripChildMixin:
    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now)

    @declared_attr
    def trip_id(cls):
        return Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)


class PricedBookingMixin(TripChildMixin):
    """Columns shared by everything that can be paid for and linked to a document."""
    price = Column(Numeric(10, 2), nullable=True)
    currency = Column(String(3), nullable=False, default="USD")
    payment_status = Column(Enum(PaymentStatus), nullable=False, default=PaymentStatus.pending)
    linked_document_id = Column(Integer, nullable=True)
