from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List

from tripplanner.models.user.user import User, Language


class ProfileService:
    @staticmethod
    async def update_language(user: User, language: str, db: AsyncSession) -> User:
        user.preferred_language = Language(language)
        await db.commit()
        await db.refresh(user)
        return user

    @staticmethod
    async def search_users(term: str, db: AsyncSession, limit: int = 10) -> List[User]:
        """Case-insensitive substring match on the display name."""
        term = term.strip()
        if not term:
            return []
        result = await db.execute(
            select(User)
            .where(func.lower(User.name).contains(term.lower(), autoescape=True))
            .order_by(User.name)
            .limit(limit)
        )
        return result.scalars().all()
