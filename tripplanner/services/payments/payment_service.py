from decimal import Decimal
from typing import List

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.core.logger import logger
from tripplanner.dependencies.trip_access import resolve_trip_access, ensure_can_write
from tripplanner.models.payments.payment import ActivityType, Payment
from tripplanner.models.user.user import User
from tripplanner.schemas.payments.payment import PaymentCreate, PaymentSummary, PaymentUpdate
from tripplanner.services.bookings.booking_services import PRICED_SERVICES
from tripplanner.services.trips.trip_child_service import TripChildService

payment_service = TripChildService(
    Payment, "payment", "Payment",
    order_by=(Payment.payment_date.desc(), Payment.id.desc()),
    name_attr=lambda p: f"{p.amount} {p.currency}",
)


def _priced_service(activity_type: ActivityType):
    service = PRICED_SERVICES.get(activity_type)
    if service is None:
        raise HTTPException(
            status_code=400,
            detail="Payments of type 'other' are not attached to an activity; list them per trip"
        )
    return service


async def create_payment(db: AsyncSession, user: User, data: PaymentCreate) -> Payment:
    access = ensure_can_write(await resolve_trip_access(db, data.trip_id, user))

    if data.activity_type != ActivityType.other:
        activity = await PRICED_SERVICES[data.activity_type].get_by_id(db, data.activity_id)
        if activity.trip_id != data.trip_id:
            raise HTTPException(status_code=400, detail="Activity does not belong to this trip")

    payment = await payment_service.create(db, access, data)
    logger.info(
        f"Payment {payment.id} of {payment.amount} {payment.currency} recorded for "
        f"{data.activity_type.value} {data.activity_id}"
    )
    return payment


async def update_payment(db: AsyncSession, user: User, payment_id: int, data: PaymentUpdate) -> Payment:
    return await payment_service.update(db, user, payment_id, data)


async def delete_payment(db: AsyncSession, user: User, payment_id: int) -> dict:
    return await payment_service.delete(db, user, payment_id)


async def _activity_payments(db: AsyncSession, activity_type: ActivityType, activity_id: int) -> List[Payment]:
    result = await db.execute(
        select(Payment)
        .where(Payment.activity_type == activity_type, Payment.activity_id == activity_id)
        .order_by(Payment.payment_date, Payment.id)
    )
    return result.scalars().all()


async def list_activity_payments(
    db: AsyncSession, user: User, activity_type: ActivityType, activity_id: int
) -> List[Payment]:
    await _priced_service(activity_type).get_with_access(db, user, activity_id)
    return await _activity_payments(db, activity_type, activity_id)


async def get_activity_summary(
    db: AsyncSession, user: User, activity_type: ActivityType, activity_id: int
) -> PaymentSummary:
    """Price versus payments made in the activity's own currency."""
    activity, _ = await _priced_service(activity_type).get_with_access(db, user, activity_id)
    payments = await _activity_payments(db, activity_type, activity_id)

    currency = activity.currency or "USD"
    total_paid = sum(
        (Decimal(str(p.amount)) for p in payments if (p.currency or "USD") == currency),
        Decimal("0"),
    )
    price = Decimal(str(activity.price)) if activity.price is not None else None
    remaining = max(price - total_paid, Decimal("0")) if price is not None else None

    return PaymentSummary(
        activity_type=activity_type,
        activity_id=activity_id,
        currency=currency,
        total_price=float(price) if price is not None else None,
        total_paid=float(total_paid),
        remaining=float(remaining) if remaining is not None else None,
        is_fully_paid=price is not None and total_paid >= price,
        payment_count=len(payments),
    )

