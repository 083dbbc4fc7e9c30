from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from tripplanner.models.bookings.base import PaymentStatus
from tripplanner.schemas.common import CurrencyCode, Price


class PricedFields(BaseModel):
    """Price, payment status and document link carried by every booking."""
    price: Optional[Price] = None
    currency: CurrencyCode = "USD"
    payment_status: PaymentStatus = PaymentStatus.pending
    linked_document_id: Optional[int] = None


class PricedFieldsUpdate(BaseModel):
    price: Optional[Price] = None
    currency: Optional[CurrencyCode] = None
    payment_status: Optional[PaymentStatus] = None
    # Sending null explicitly unlinks the document
    linked_document_id: Optional[int] = None


class PricedFieldsOut(BaseModel):
    id: int
    trip_id: int
    price: Optional[float] = None
    currency: str
    payment_status: PaymentStatus
    linked_document_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
