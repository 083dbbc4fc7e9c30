from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from tripplanner.core.database import get_db
from tripplanner.dependencies.auth import get_current_user
from tripplanner.dependencies.trip_access import TripAccess, get_trip_reader, get_trip_writer, get_trip_owner
from tripplanner.models.user.user import User
from tripplanner.schemas.trip.trip_schema import (
    TripCreate, TripUpdate, TripResponse, TripDetailResponse, ShareLinkResponse,
)
from tripplanner.services.trips.trip_service import TripService
from tripplanner.utils.storage import get_storage

router = APIRouter(prefix="/trips", tags=["Trips"])


async def get_trip_service() -> TripService:
    return TripService()


def _detail(access: TripAccess) -> TripDetailResponse:
    data = TripResponse.model_validate(access.trip).model_dump()
    return TripDetailResponse(**data, access=access.role)


@router.get("", response_model=List[TripResponse])
async def list_trips(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.list_user_trips(db, current_user)


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip: TripCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.create_trip(db, trip, current_user)


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(
    access: TripAccess = Depends(get_trip_reader),
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    await trip_service.record_visit(db, access)
    return _detail(access)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_update: TripUpdate,
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.update_trip(db, access, trip_update)


@router.delete("/{trip_id}")
async def delete_trip(
    access: TripAccess = Depends(get_trip_owner),
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.delete_trip(db, access)


@router.post("/{trip_id}/share-link", response_model=ShareLinkResponse)
async def generate_share_link(
    access: TripAccess = Depends(get_trip_owner),
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    token = await trip_service.generate_share_link(db, access)
    return {"share_token": token}


@router.delete("/{trip_id}/share-link")
async def revoke_share_link(
    access: TripAccess = Depends(get_trip_owner),
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.revoke_share_link(db, access)


@router.post("/{trip_id}/cover-image", response_model=TripResponse)
async def upload_cover_image(
    file: UploadFile = File(...),
    access: TripAccess = Depends(get_trip_writer),
    db: AsyncSession = Depends(get_db),
    storage=Depends(get_storage),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.upload_cover_image(db, access, file, storage)
