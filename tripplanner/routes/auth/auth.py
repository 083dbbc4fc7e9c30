from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from urllib.parse import urlencode

from tripplanner.core.config import settings
from tripplanner.core.database import get_db
from tripplanner.core.redis_lifecycle import get_redis_client
from tripplanner.dependencies.auth import get_current_user, get_optional_user
from tripplanner.models.user.user import User
from tripplanner.schemas.user.user import (
    UserCreate, UserLogin, UserOut, TokenResponse, RefreshRequest, LogoutRequest, LanguageUpdate,
)
from tripplanner.services.auth import auth as auth_service
from tripplanner.services.auth.profile_service import ProfileService
from tripplanner.utils.Oauth.googleauth import oauth, generate_nonce

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserOut, status_code=201)
async def register(user: UserCreate, db: AsyncSession = Depends(get_db)):
    return await auth_service.register_user(user, db)


@router.post("/login", response_model=TokenResponse)
async def login_route(
    user_data: UserLogin,
    db: AsyncSession = Depends(get_db),
    redis_client=Depends(get_redis_client)
):
    return await auth_service.login_user(user_data.email, user_data.password, db, redis_client)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token_route(body: RefreshRequest, redis_client=Depends(get_redis_client)):
    return await auth_service.refresh_access_token(body.refresh_token, redis_client)


@router.post("/logout")
async def logout(body: LogoutRequest, redis_client=Depends(get_redis_client)):
    return await auth_service.logout_user(body.refresh_token, redis_client, body.all_sessions)


@router.get("/me", response_model=Optional[UserOut])
async def me(current_user: Optional[User] = Depends(get_optional_user)):
    return current_user


@router.put("/language", response_model=UserOut)
async def update_language(
    body: LanguageUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await ProfileService.update_language(current_user, body.language, db)


@router.get("/google/login")
async def google_login(request: Request, redis_client=Depends(get_redis_client)):
    nonce = generate_nonce()
    request.session["nonce"] = nonce
    await redis_client.setex(f"google_nonce:{nonce}", 600, "valid")
    redirect_uri = request.url_for("google_callback")
    return await oauth.google.authorize_redirect(request, redirect_uri, nonce=nonce)


@router.get("/google/callback")
async def google_callback(
    request: Request,
    db: AsyncSession = Depends(get_db),
    redis_client=Depends(get_redis_client)
):
    user_data = await auth_service.handle_google_callback(request, db, redis_client)
    query = urlencode({
        "new_user": str(user_data["is_new_user"]).lower(),
        "access_token": user_data["access_token"],
        "refresh_token": user_data["refresh_token"],
    })
    return RedirectResponse(f"{settings.FRONTEND_BASE_URL.rstrip('/')}/login?{query}")
