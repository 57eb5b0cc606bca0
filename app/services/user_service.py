from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserDirectory:
    """
    Storage access for user records.

    Writes only flush; committing belongs to the workflow that owns the
    transaction.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by their unique identifier.

        Args:
            user_id: str - Unique identifier of the user

        Returns:
            Optional[User]: User object if found, None otherwise
        """
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_active_by_id(self, user_id: str) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.id == user_id, User.is_active == True)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email address, active or not.

        Args:
            email: str - Email address, normalized before the lookup

        Returns:
            Optional[User]: User object if found, None otherwise
        """
        result = await self.db.execute(select(User).where(User.email == normalize_email(email)))
        return result.scalar_one_or_none()

    async def get_active_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.email == normalize_email(email), User.is_active == True)
        )
        return result.scalar_one_or_none()

    async def save(self, user: User) -> User:
        user.email = normalize_email(user.email)
        self.db.add(user)
        await self.db.flush()
        return user

    async def update(self, user: User, user_id: str) -> User:
        """
        Persist changes made to an existing user.

        Args:
            user: User - Instance carrying the new state
            user_id: str - Identifier of the record being updated

        Returns:
            User: The updated user
        """
        if user.id != user_id:
            raise ValueError(f"User id mismatch: {user.id} != {user_id}")
        self.db.add(user)
        await self.db.flush()
        return user
