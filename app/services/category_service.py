import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.errors import CategoryNotFoundError, UserNotFoundError
from app.models import Category
from app.services.user_service import UserDirectory

logger = logging.getLogger(__name__)


class CategoryManager:
    def __init__(self, db: AsyncSession, users: UserDirectory):
        self.db = db
        self.users = users

    async def get_owned(self, category_id: str, user_id: str) -> Optional[Category]:
        result = await self.db.execute(
            select(Category).where(Category.id == category_id, Category.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create(self, description: str, user_id: str) -> Category:
        """
        Create a category owned by an active user.

        Raises:
            UserNotFoundError: If the user is missing or inactive
        """
        user = await self.users.get_active_by_id(user_id)
        if user is None:
            raise UserNotFoundError("User not provided for category")

        async with transaction(self.db):
            category = Category(description=description, user_id=user.id)
            self.db.add(category)
            await self.db.flush()

        logger.info(f"Created category {category.id} for user {user_id}")
        return category

    async def list(self, user_id: str, description: Optional[str] = None) -> List[Category]:
        """
        List a user's categories.

        Args:
            user_id: Owner of the categories
            description: Optional case-insensitive fragment the description must contain

        Returns:
            List[Category]: Matching categories ordered by description
        """
        query = select(Category).where(Category.user_id == user_id)
        if description:
            query = query.where(Category.description.ilike(f"%{description}%"))
        result = await self.db.execute(query.order_by(Category.description))
        return list(result.scalars().all())

    async def update(self, category_id: str, description: str, user_id: str) -> Category:
        category = await self.get_owned(category_id, user_id)
        if category is None:
            raise CategoryNotFoundError()

        async with transaction(self.db):
            category.description = description
            await self.db.flush()

        return category
