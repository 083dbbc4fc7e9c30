from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.core.database import get_db
from tripplanner.core.redis_lifecycle import get_redis_client
from tripplanner.dependencies.auth import get_current_user
from tripplanner.models.user.user import User
from tripplanner.schemas.demo.demo import DemoInitResponse, DemoStatus
from tripplanner.services.demo.demo_service import get_demo_status, initialize_demo

router = APIRouter(prefix="/demo", tags=["Demo"])


@router.post("/initialize", response_model=DemoInitResponse, status_code=status.HTTP_201_CREATED)
async def start_demo(db: AsyncSession = Depends(get_db), redis_client=Depends(get_redis_client)):
    """Create a throwaway demo account with its own copy of the sample trip."""
    return await initialize_demo(db, redis_client)


@router.get("/status", response_model=DemoStatus)
async def demo_status(current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await get_demo_status(db, current_user)
