from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from tripplanner.models.trips.checklist_models import ChecklistItem
from tripplanner.schemas.trip.checklist import ChecklistProgress
from tripplanner.services.trips.trip_child_service import TripChildService

checklist_service = TripChildService(
    ChecklistItem, "checklist_item", "Checklist item",
    order_by=(ChecklistItem.created_at, ChecklistItem.id),
    name_attr="title",
)


def _bucket(counts: dict, key: str, completed: bool, count: int) -> None:
    if key not in counts:
        counts[key] = {"completed": 0, "pending": 0}
    counts[key]["completed" if completed else "pending"] += count


async def get_checklist_progress(session: AsyncSession, trip_id: int) -> ChecklistProgress:
    """Overall completion plus per-category and per-owner breakdowns."""
    result = await session.execute(
        select(
            ChecklistItem.category,
            ChecklistItem.owner,
            ChecklistItem.completed,
            func.count(ChecklistItem.id)
        ).where(ChecklistItem.trip_id == trip_id)
        .group_by(ChecklistItem.category, ChecklistItem.owner, ChecklistItem.completed)
    )

    total_tasks = 0
    completed_tasks = 0
    tasks_by_category = {}
    tasks_by_owner = {}
    for category, owner, completed, count in result:
        total_tasks += count
        if completed:
            completed_tasks += count
        category = category.value if hasattr(category, "value") else str(category)
        _bucket(tasks_by_category, category, completed, count)
        _bucket(tasks_by_owner, owner, completed, count)

    completion_percentage = round(completed_tasks / total_tasks * 100, 1) if total_tasks else 0.0

    return ChecklistProgress(
        total_tasks=total_tasks,
        completed_tasks=completed_tasks,
        pending_tasks=total_tasks - completed_tasks,
        completion_percentage=completion_percentage,
        tasks_by_category=tasks_by_category,
        tasks_by_owner=tasks_by_owner,
    )
