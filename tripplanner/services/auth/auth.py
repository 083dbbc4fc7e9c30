from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from jose import JWTError
from typing import Optional

from tripplanner.core.config import settings
from tripplanner.core.logger import logger
from tripplanner.core.security import (
    hash_password, verify_password, create_access_token, decode_token,
    refresh_token, is_refresh_token_valid, revoke_refresh_token, revoke_all_refresh_tokens,
)
from tripplanner.models.user.user import User, UserRole
from tripplanner.schemas.user.user import UserCreate
from tripplanner.utils.Oauth.googleauth import oauth
from tripplanner.utils.time_format import utc_now


def _role_for(email: str) -> UserRole:
    if settings.OWNER_EMAIL and email.lower() == settings.OWNER_EMAIL.lower():
        return UserRole.admin
    return UserRole.user


async def issue_tokens(user: User, redis_client) -> dict:
    access_token = create_access_token({"sub": str(user.id)})
    refresh_token_str = await refresh_token(user.id, redis_client)
    return {
        "access_token": access_token,
        "refresh_token": refresh_token_str,
        "token_type": "bearer",
    }


async def register_user(user_data: UserCreate, db: AsyncSession) -> User:
    existing = await db.scalar(select(User).where(User.email == user_data.email))
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")

    new_user = User(
        email=user_data.email,
        name=user_data.name,
        hashed_password=hash_password(user_data.password),
        role=_role_for(user_data.email),
        auth_type="local",
    )
    db.add(new_user)
    try:
        await db.commit()
        await db.refresh(new_user)
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")

    logger.info(f"User {new_user.id} registered")
    return new_user


async def login_user(email: str, password: str, db: AsyncSession, redis_client) -> dict:
    user = await db.scalar(select(User).where(User.email == email))

    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if user.auth_type != "local" or not user.hashed_password:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registered with different auth method"
        )

    if not verify_password(password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    user.last_signed_in = utc_now()
    await db.commit()

    return await issue_tokens(user, redis_client)


async def refresh_access_token(token: str, redis_client) -> dict:
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token"
        )

    user_id = payload.get("sub")
    jti = payload.get("jti")
    if not user_id or not jti or payload.get("type") != "refresh":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token payload"
        )

    if not await is_refresh_token_valid(redis_client, user_id, jti):
        raise HTTPException(status_code=401, detail="Refresh token revoked")

    return {
        "access_token": create_access_token({"sub": user_id}),
        "refresh_token": token,
        "token_type": "bearer"
    }


async def logout_user(token: Optional[str], redis_client, all_sessions: bool = False) -> dict:
    if not token:
        return {"success": True}

    try:
        payload = decode_token(token)
    except JWTError:
        return {"success": True}

    user_id = payload.get("sub")
    jti = payload.get("jti")
    if not user_id:
        return {"success": True}

    if all_sessions:
        await revoke_all_refresh_tokens(redis_client, user_id)
    elif jti:
        await revoke_refresh_token(redis_client, user_id, jti)

    logger.info(f"User {user_id} logged out (all_sessions={all_sessions})")
    return {"success": True}


async def handle_google_callback(request, db: AsyncSession, redis_client) -> dict:
    token = await oauth.google.authorize_access_token(request)
    if not token:
        raise HTTPException(status_code=400, detail="Failed to retrieve access token from Google")

    claims = token.get("userinfo") or {}
    received_nonce = claims.get("nonce")
    if not received_nonce:
        raise HTTPException(status_code=400, detail="Nonce missing from token")

    stored_nonce = await redis_client.get(f"google_nonce:{received_nonce}")
    if not stored_nonce:
        raise HTTPException(status_code=400, detail="Invalid or expired nonce")
    await redis_client.delete(f"google_nonce:{received_nonce}")

    email = claims.get("email")
    if not email:
        raise HTTPException(status_code=400, detail="Email not found in Google user info")

    user = await db.scalar(select(User).where(User.email == email))
    is_new_user = user is None

    if is_new_user:
        user = User(
            email=email,
            name=claims.get("name", email.split("@")[0]),
            hashed_password=None,
            role=_role_for(email),
            auth_type="google",
        )
        db.add(user)
    elif user.auth_type != "google":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                            detail="User registered with different auth method")

    user.last_signed_in = utc_now()
    await db.commit()
    await db.refresh(user)

    tokens = await issue_tokens(user, redis_client)
    return {**tokens, "user": user, "is_new_user": is_new_user}
