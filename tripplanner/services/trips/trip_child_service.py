"""CRUD over the tables that hang off a trip.

Every itinerary record (hotels, transportation, restaurants, checklist
items, ...) follows the same lifecycle: list by trip, create under a trip,
update and delete by its own id. ``TripChildService`` implements that once
and leaves ordering, display names and follow-up cleanup to configuration.
"""
from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from tripplanner.core.logger import logger
from tripplanner.dependencies.trip_access import TripAccess, resolve_trip_access, ensure_can_write
from tripplanner.models.payments.payment import Payment
from tripplanner.models.user.user import User
from tripplanner.services.trips.activity_log_service import record_activity


class TripChildService:
    def __init__(
        self,
        model,
        entity_type: str,
        label: str,
        order_by: Sequence[Any] = (),
        name_attr: Union[str, Callable] = "name",
        payment_activity: Optional[str] = None,
        query_options: Sequence[Any] = (),
    ):
        self.model = model
        self.entity_type = entity_type
        self.label = label
        self.order_by = tuple(order_by) or (model.id,)
        self.name_attr = name_attr
        # Activity type under which payments reference this entity, if any
        self.payment_activity = payment_activity
        self.query_options = tuple(query_options)

    def display_name(self, item) -> Optional[str]:
        if callable(self.name_attr):
            return self.name_attr(item)
        value = getattr(item, self.name_attr, None)
        return str(value) if value is not None else None

    async def list_for_trip(self, db: AsyncSession, trip_id: int) -> list:
        result = await db.execute(
            select(self.model)
            .options(*self.query_options)
            .where(self.model.trip_id == trip_id)
            .order_by(*self.order_by)
        )
        return result.scalars().all()

    async def get_by_id(self, db: AsyncSession, item_id: int):
        item = await db.scalar(
            select(self.model).options(*self.query_options).where(self.model.id == item_id)
        )
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{self.label} not found")
        return item

    async def get_with_access(
        self, db: AsyncSession, user: User, item_id: int, write: bool = False
    ) -> Tuple[Any, TripAccess]:
        """Load a row and check the caller's access to the trip it belongs to."""
        item = await self.get_by_id(db, item_id)
        access = await resolve_trip_access(db, item.trip_id, user)
        if write:
            ensure_can_write(access)
        return item, access

    def _clean_update(self, data: dict) -> dict:
        # Explicit nulls are only applied to nullable columns
        columns = self.model.__table__.c
        return {
            key: value for key, value in data.items()
            if value is not None or (key in columns and columns[key].nullable)
        }

    async def create(self, db: AsyncSession, access: TripAccess, data: BaseModel, **extra):
        ensure_can_write(access)
        item = self.model(trip_id=access.trip.id, **data.model_dump(exclude={"trip_id"}), **extra)
        db.add(item)
        await db.flush()

        record_activity(
            db, access.trip.id, access.user.id, "created",
            self.entity_type, item.id, self.display_name(item)
        )
        await db.commit()
        item = await self._reload(db, item)

        logger.info(f"{self.label} {item.id} created in trip {access.trip.id} by user {access.user.id}")
        return item

    async def update(self, db: AsyncSession, user: User, item_id: int, data: BaseModel,
                     before_apply: Optional[Callable] = None):
        item, access = await self.get_with_access(db, user, item_id, write=True)

        update_data = self._clean_update(data.model_dump(exclude_unset=True))
        if before_apply is not None:
            await before_apply(db, item, update_data)
        for key, value in update_data.items():
            setattr(item, key, value)

        record_activity(
            db, item.trip_id, user.id, "updated",
            self.entity_type, item.id, self.display_name(item)
        )
        await db.commit()
        item = await self._reload(db, item)

        logger.info(f"{self.label} {item_id} updated by user {user.id}")
        return item

    async def delete(self, db: AsyncSession, user: User, item_id: int) -> dict:
        item, access = await self.get_with_access(db, user, item_id, write=True)

        if self.payment_activity is not None:
            await db.execute(
                delete(Payment).where(
                    Payment.activity_type == self.payment_activity,
                    Payment.activity_id == item.id,
                )
            )

        record_activity(
            db, item.trip_id, user.id, "deleted",
            self.entity_type, item.id, self.display_name(item)
        )
        await db.delete(item)
        await db.commit()

        logger.info(f"{self.label} {item_id} deleted by user {user.id}")
        return {"success": True}

    async def _reload(self, db: AsyncSession, item):
        if not self.query_options:
            await db.refresh(item)
            return item
        # Relationships must be eagerly loaded again after a commit
        db.expunge(item)
        return await self.get_by_id(db, item.id)
