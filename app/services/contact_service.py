import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ContactIdentityNotFoundError, InviteNotFoundError
from app.models import Contact, User, UserContact
from app.schemas.contacts import ContactStatus

# Configure logging for this module
logger = logging.getLogger(__name__)


class UserContactStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_user_id(self, user_id: str) -> Optional[UserContact]:
        result = await self.db.execute(select(UserContact).where(UserContact.user_id == user_id))
        return result.scalar_one_or_none()

    async def save(self, user_contact: UserContact) -> UserContact:
        self.db.add(user_contact)
        await self.db.flush()
        return user_contact


class ContactStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, contact: Contact) -> Contact:
        self.db.add(contact)
        await self.db.flush()
        return contact

    async def get_for_receiver(self, invite_id: str, receiver_contact_id: str) -> Optional[Contact]:
        result = await self.db.execute(
            select(Contact).where(
                Contact.id == invite_id,
                Contact.receiver_contact_id == receiver_contact_id
            )
        )
        return result.scalar_one_or_none()

    async def resolve_pending(self, contact: Contact, status: ContactStatus) -> bool:
        """
        Move a PENDING invite to a resolved status in a single conditional UPDATE.

        Returns:
            bool: False when the stored invite was no longer PENDING
        """
        result = await self.db.execute(
            update(Contact)
            .where(Contact.id == contact.id, Contact.status == ContactStatus.PENDING)
            .values(status=status, resolved_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return False
        await self.db.refresh(contact)
        return True

    async def get_pending_between(self, requester_contact_id: str, receiver_contact_id: str) -> Optional[Contact]:
        result = await self.db.execute(
            select(Contact).where(
                Contact.requester_contact_id == requester_contact_id,
                Contact.receiver_contact_id == receiver_contact_id,
                Contact.status == ContactStatus.PENDING
            )
        )
        return result.scalar_one_or_none()

    async def list_for_receiver(self, receiver_contact_id: str) -> List[Contact]:
        result = await self.db.execute(
            select(Contact)
            .where(Contact.receiver_contact_id == receiver_contact_id)
            .order_by(Contact.created_at, Contact.id)
        )
        return list(result.scalars().all())


class ContactGraph:
    """
    Per-user contact identities and the raw invite edges between them.

    Holds no transition rules; those live in the invite workflow.
    """

    def __init__(self, user_contacts: UserContactStore, contacts: ContactStore):
        self.user_contacts = user_contacts
        self.contacts = contacts

    async def identity_for(self, user_id: str) -> UserContact:
        """
        Resolve the contact identity of a user.

        Raises:
            ContactIdentityNotFoundError: If the user has no identity
        """
        identity = await self.user_contacts.get_by_user_id(user_id)
        if identity is None:
            raise ContactIdentityNotFoundError()
        return identity

    async def ensure_identity(self, user: User) -> UserContact:
        identity = await self.user_contacts.get_by_user_id(user.id)
        if identity is not None:
            return identity
        logger.info(f"Creating contact identity for user {user.id}")
        return await self.user_contacts.save(UserContact(user_id=user.id))

    async def publish_identity(self, user_id: str, username: str, avatar: Optional[str]) -> UserContact:
        identity = await self.identity_for(user_id)
        identity.username = username
        identity.avatar = avatar
        return await self.user_contacts.save(identity)

    async def find_pending_invite(self, invite_id: str, receiver_contact_id: str) -> Contact:
        """
        Fetch an invite only if it is addressed to the given receiver.

        An unknown id and an invite addressed to someone else raise the same
        error, so callers cannot probe for other users' invites.

        Raises:
            InviteNotFoundError: If no such invite exists for this receiver
        """
        invite = await self.contacts.get_for_receiver(invite_id, receiver_contact_id)
        if invite is None:
            raise InviteNotFoundError()
        return invite
