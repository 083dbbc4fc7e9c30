from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List, Optional

from tripplanner.models.trips.activity_log import ActivityLog


def record_activity(
    session: AsyncSession,
    trip_id: int,
    user_id: int,
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    entity_name: Optional[str] = None,
) -> ActivityLog:
    """Stage an audit row; it is written with the caller's commit."""
    entry = ActivityLog(
        trip_id=trip_id,
        user_id=user_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        entity_name=entity_name,
    )
    session.add(entry)
    return entry


async def get_trip_activity(session: AsyncSession, trip_id: int, limit: int = 50) -> List[ActivityLog]:
    result = await session.execute(
        select(ActivityLog)
        .options(selectinload(ActivityLog.user))
        .where(ActivityLog.trip_id == trip_id)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
    )
    return result.scalars().all()
