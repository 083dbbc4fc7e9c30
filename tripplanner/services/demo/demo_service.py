"""
Demo accounts.

A demo account is a throwaway user with an expiry date and a small trip
quota. On creation it receives its own copy of a curated template trip.
The user and every copied row are written in a single transaction, so a
failure leaves nothing behind.
"""
import math
import secrets
from datetime import timedelta

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tripplanner.core.config import settings
from tripplanner.core.logger import logger
from tripplanner.models import (
    ChecklistItem, DayTrip, Document, Hotel, Restaurant, Route,
    RoutePointOfInterest, TouristSite, Transportation, Trip, User,
)
from tripplanner.models.documents.document import DocumentCategory
from tripplanner.services.auth.auth import issue_tokens
from tripplanner.utils.time_format import utc_now

DEMO_TRIP_NAME = "Discover Slovakia"

# Copied row by row; payments and car rentals stay with the template
COPIED_MODELS = (Hotel, Transportation, TouristSite, Restaurant, DayTrip, ChecklistItem)

_SKIPPED_COLUMNS = {"id", "trip_id", "created_at", "updated_at"}

SAMPLE_DOCUMENTS = (
    ("Sample Passport Copy", DocumentCategory.passport, "demo/sample-passport.pdf",
     "This is a sample document for demonstration purposes"),
    ("Sample Flight Booking", DocumentCategory.flights, "demo/sample-flight-booking.pdf",
     "Example flight booking confirmation"),
    ("Sample Hotel Confirmation", DocumentCategory.hotel, "demo/sample-hotel-confirmation.pdf",
     "Example hotel reservation"),
    ("Sample Travel Insurance", DocumentCategory.insurance, "demo/sample-insurance.pdf",
     "Example travel insurance policy"),
)

DEMO_DOCUMENT_URL = "/demo-document-placeholder"


def _column_values(row, skip=_SKIPPED_COLUMNS) -> dict:
    return {
        column.key: getattr(row, column.key)
        for column in row.__table__.columns
        if column.key not in skip
    }


async def _copy_rows(db: AsyncSession, model, from_trip_id: int, to_trip_id: int) -> int:
    result = await db.execute(select(model).where(model.trip_id == from_trip_id).order_by(model.id))
    rows = result.scalars().all()
    for row in rows:
        values = _column_values(row)
        if model is ChecklistItem:
            values["owner"] = "shared"
        if "linked_document_id" in values:
            # Template documents are not copied, so links would dangle
            values["linked_document_id"] = None
        db.add(model(trip_id=to_trip_id, **values))
    return len(rows)


async def _copy_routes(db: AsyncSession, from_trip_id: int, to_trip_id: int) -> int:
    result = await db.execute(
        select(Route)
        .options(selectinload(Route.points))
        .where(Route.trip_id == from_trip_id)
        .order_by(Route.id)
    )
    routes = result.scalars().all()
    for route in routes:
        new_route = Route(trip_id=to_trip_id, **_column_values(route))
        new_route.points = [
            RoutePointOfInterest(**_column_values(point, skip={"id", "route_id", "created_at"}))
            for point in route.points
        ]
        db.add(new_route)
    return len(routes)


def _add_sample_documents(db: AsyncSession, trip_id: int) -> None:
    for name, category, file_key, notes in SAMPLE_DOCUMENTS:
        db.add(Document(
            trip_id=trip_id,
            name=name,
            category=category,
            file_url=DEMO_DOCUMENT_URL,
            file_key=file_key,
            mime_type="application/pdf",
            tags=[],
            notes=notes,
        ))


async def copy_demo_trip(db: AsyncSession, template: Trip, user_id: int) -> Trip:
    """Stage a copy of ``template`` for ``user_id``. The caller commits."""
    trip = Trip(
        user_id=user_id,
        name=DEMO_TRIP_NAME,
        destination=template.destination,
        start_date=template.start_date,
        end_date=template.end_date,
        description=template.description,
        cover_image=template.cover_image,
    )
    db.add(trip)
    await db.flush()

    copied = {model.__tablename__: await _copy_rows(db, model, template.id, trip.id) for model in COPIED_MODELS}
    copied["routes"] = await _copy_routes(db, template.id, trip.id)
    _add_sample_documents(db, trip.id)

    logger.info(f"Demo trip {trip.id} copied from template {template.id}: {copied}")
    return trip


async def initialize_demo(db: AsyncSession, redis_client) -> dict:
    template = await db.get(Trip, settings.DEMO_TRIP_ID)
    if template is None:
        logger.error(f"Demo template trip {settings.DEMO_TRIP_ID} is missing")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Demo trip not found")

    now = utc_now()
    user = User(
        email=f"demo-{secrets.token_hex(8)}@demo.tripplanner.local",
        name="Demo User",
        auth_type="demo",
        is_demo_user=True,
        demo_start_date=now,
        demo_expiry_date=now + timedelta(days=settings.DEMO_DURATION_DAYS),
        max_trips=settings.DEMO_MAX_TRIPS,
        last_signed_in=now,
    )
    try:
        db.add(user)
        await db.flush()
        trip = await copy_demo_trip(db, template, user.id)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Demo initialization failed, rolled back")
        raise

    tokens = await issue_tokens(user, redis_client)
    logger.info(f"Demo user {user.id} initialized with trip {trip.id}")
    return {
        **tokens,
        "user_id": user.id,
        "trip_id": trip.id,
        "demo_expiry_date": user.demo_expiry_date,
    }


def is_demo_expired(user: User) -> bool:
    if not user.is_demo_user or user.demo_expiry_date is None:
        return False
    return utc_now() > user.demo_expiry_date


def days_remaining(user: User):
    if not user.is_demo_user or user.demo_expiry_date is None:
        return None
    seconds = (user.demo_expiry_date - utc_now()).total_seconds()
    return max(0, math.ceil(seconds / 86400))


async def get_demo_status(db: AsyncSession, user: User) -> dict:
    trip_count = await db.scalar(select(func.count(Trip.id)).where(Trip.user_id == user.id))
    return {
        "is_demo_user": bool(user.is_demo_user),
        "expired": is_demo_expired(user),
        "days_remaining": days_remaining(user),
        "max_trips": user.max_trips,
        "trip_count": trip_count or 0,
    }
