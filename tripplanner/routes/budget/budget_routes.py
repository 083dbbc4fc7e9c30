from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from tripplanner.core.cache import RedisCache
from tripplanner.core.database import get_db
from tripplanner.core.logger import logger
from tripplanner.core.redis_lifecycle import get_cache
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader
from tripplanner.schemas.budget.budget import BudgetResponse
from tripplanner.services.budget.budget_service import get_trip_budget

router = APIRouter(prefix="/trips", tags=["Budget"])


@router.get("/{trip_id}/budget", response_model=BudgetResponse)
async def trip_budget(
    base_currency: Optional[str] = Query(None, min_length=3, max_length=3),
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db),
    cache: RedisCache = Depends(get_cache)
):
    try:
        return await get_trip_budget(db, access.trip.id, cache, base_currency)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Budget calculation failed for trip {access.trip.id}")
        raise HTTPException(status_code=500, detail=f"Failed to calculate budget: {str(e)}")
