import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User, VerificationCode

logger = logging.getLogger(__name__)


class VerificationCodeStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_valid_by_user_id(self, user_id: str) -> Optional[VerificationCode]:
        result = await self.db.execute(
            select(VerificationCode).where(
                VerificationCode.user_id == user_id,
                VerificationCode.is_valid == True
            )
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, code_id: str) -> Optional[VerificationCode]:
        result = await self.db.execute(select(VerificationCode).where(VerificationCode.id == code_id))
        return result.scalar_one_or_none()

    async def save(self, code: VerificationCode) -> VerificationCode:
        self.db.add(code)
        await self.db.flush()
        return code


class VerificationCodeManager:
    """
    Keeps at most one valid verification code per user.

    Runs inside the caller's transaction; nothing here commits.
    """

    def __init__(self, store: VerificationCodeStore):
        self.store = store

    async def issue(self, user: User) -> str:
        """
        Invalidate the user's current valid code, if any, and issue a new one.

        Args:
            user: User the code is bound to

        Returns:
            str: Identifier of the new code
        """
        current = await self.store.get_valid_by_user_id(user.id)
        if current is not None:
            await self.invalidate(current)

        code = await self.store.save(VerificationCode(user_id=user.id, is_valid=True))
        logger.info(f"Issued verification code for user {user.id}")
        return code.id

    async def invalidate(self, code: VerificationCode) -> VerificationCode:
        if not code.is_valid:
            return code
        return await self.store.save(code.disable())
