import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.errors import CategoryNotFoundError, UserNotFoundError
from app.models import Release
from app.schemas.releases import ReleaseCreate
from app.services.category_service import CategoryManager
from app.services.user_service import UserDirectory

logger = logging.getLogger(__name__)


class CashFlow:
    """Income and expense entries recorded against a user's categories."""

    def __init__(self, db: AsyncSession, users: UserDirectory, categories: CategoryManager):
        self.db = db
        self.users = users
        self.categories = categories

    async def create_release(self, payload: ReleaseCreate, user_id: str) -> Release:
        """
        Record a release for an active user.

        Args:
            payload: ReleaseCreate - Value, type, status, date and category
            user_id: Owner of the release

        Returns:
            Release: The persisted release

        Raises:
            UserNotFoundError: If the user is missing or inactive
            CategoryNotFoundError: If the category does not belong to the user
        """
        user = await self.users.get_active_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        category = await self.categories.get_owned(payload.category_id, user.id)
        if category is None:
            raise CategoryNotFoundError()

        async with transaction(self.db):
            release = Release(
                value=payload.value,
                description=payload.description,
                status=payload.status,
                type=payload.type,
                release_date=payload.release_date,
                category_id=category.id,
                user_id=user.id
            )
            self.db.add(release)
            await self.db.flush()

        logger.info(f"Recorded {payload.type.value.lower()} release {release.id} for user {user_id}")
        return release

    async def list_releases(self, user_id: str) -> List[Release]:
        result = await self.db.execute(
            select(Release)
            .where(Release.user_id == user_id)
            .order_by(Release.release_date.desc(), Release.id)
        )
        return list(result.scalars().all())
