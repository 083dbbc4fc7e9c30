from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional, Annotated
from datetime import date, datetime
from tripplanner.models.payments.payment import ActivityType, PaymentMethod
from tripplanner.schemas.common import CurrencyCode

Amount = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]


class PaymentCreate(BaseModel):
    trip_id: int
    activity_type: ActivityType
    activity_id: int
    amount: Amount
    currency: CurrencyCode = "USD"
    payment_date: date
    payment_method: PaymentMethod = PaymentMethod.credit_card
    notes: Optional[str] = None


class PaymentUpdate(BaseModel):
    amount: Optional[Amount] = None
    currency: Optional[CurrencyCode] = None
    payment_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class PaymentResponse(BaseModel):
    id: int
    trip_id: int
    activity_type: ActivityType
    activity_id: int
    amount: float
    currency: str
    payment_date: date
    payment_method: PaymentMethod
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PaymentSummary(BaseModel):
    activity_type: ActivityType
    activity_id: int
    currency: str
    total_price: Optional[float] = None
    total_paid: float
    remaining: Optional[float] = None
    is_fully_paid: bool
    payment_count: int
