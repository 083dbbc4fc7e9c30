from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader
from tripplanner.models.payments.payment import ActivityType
from tripplanner.models.user.user import User
from tripplanner.schemas.payments.payment import PaymentCreate, PaymentResponse, PaymentSummary, PaymentUpdate
from tripplanner.services.payments import payment_service as payments

router = APIRouter(tags=["Payments"])


@router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    data: PaymentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await payments.create_payment(db, current_user, data)


@router.put("/payments/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    data: PaymentUpdate,
    payment_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await payments.update_payment(db, current_user, payment_id, data)


@router.delete("/payments/{payment_id}")
async def delete_payment(
    payment_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await payments.delete_payment(db, current_user, payment_id)


@router.get("/trips/{trip_id}/payments", response_model=List[PaymentResponse])
async def list_trip_payments(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db)
):
    return await payments.payment_service.list_for_trip(db, access.trip.id)


@router.get("/payments/activity/{activity_type}/{activity_id}", response_model=List[PaymentResponse])
async def list_activity_payments(
    activity_type: ActivityType,
    activity_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await payments.list_activity_payments(db, current_user, activity_type, activity_id)


@router.get("/payments/activity/{activity_type}/{activity_id}/summary", response_model=PaymentSummary)
async def activity_payment_summary(
    activity_type: ActivityType,
    activity_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await payments.get_activity_summary(db, current_user, activity_type, activity_id)
