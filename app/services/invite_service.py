import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.errors import (
    ContactIdentityNotFoundError,
    InviteAlreadyPendingError,
    InviteNotPendingError,
    RequesterNotFoundError,
    SelfInviteNotAllowedError,
)
from app.models import Contact, UserContact
from app.schemas.contacts import ContactStatus
from app.services.contact_service import ContactGraph
from app.services.user_service import UserDirectory

# Configure logging for this module
logger = logging.getLogger(__name__)


class InviteWorkflow:
    """
    State machine for contact invites: PENDING -> ACCEPTED | REFUSED.

    Only the receiver resolves an invite, and resolved invites never change
    again; a new proposal is a new invite.
    """

    def __init__(self, db: AsyncSession, users: UserDirectory, graph: ContactGraph):
        self.db = db
        self.users = users
        self.graph = graph

    async def invite(self, requester_user_id: str, receiver_user_id: str) -> Contact:
        """
        Send a contact invite from one user to another.

        Args:
            requester_user_id: User sending the invite
            receiver_user_id: User receiving it

        Returns:
            Contact: The created invite, PENDING

        Raises:
            SelfInviteNotAllowedError: If both ids are the same user
            RequesterNotFoundError: If the requester is not an active user
            ContactIdentityNotFoundError: If either side has no contact identity
                or the receiver is not an active user
            InviteAlreadyPendingError: If the same invite is still pending
        """
        if requester_user_id == receiver_user_id:
            raise SelfInviteNotAllowedError()

        requester = await self.users.get_active_by_id(requester_user_id)
        if requester is None:
            raise RequesterNotFoundError()
        requester_identity = await self.graph.identity_for(requester.id)

        receiver = await self.users.get_active_by_id(receiver_user_id)
        if receiver is None:
            raise ContactIdentityNotFoundError()
        receiver_identity = await self.graph.identity_for(receiver.id)

        existing = await self.graph.contacts.get_pending_between(requester_identity.id, receiver_identity.id)
        if existing is not None:
            raise InviteAlreadyPendingError()

        async with transaction(self.db):
            try:
                invite = await self.graph.contacts.save(
                    Contact(
                        requester=requester_identity,
                        receiver=receiver_identity,
                        status=ContactStatus.PENDING
                    )
                )
            except IntegrityError as e:
                raise InviteAlreadyPendingError() from e

        logger.info(f"User {requester_user_id} invited user {receiver_user_id} (invite {invite.id})")
        return invite

    async def accept(self, invite_id: str, receiver_user_id: str) -> Contact:
        return await self._resolve(invite_id, receiver_user_id, ContactStatus.ACCEPTED)

    async def refuse(self, invite_id: str, receiver_user_id: str) -> Contact:
        return await self._resolve(invite_id, receiver_user_id, ContactStatus.REFUSED)

    async def _resolve(self, invite_id: str, receiver_user_id: str, status: ContactStatus) -> Contact:
        receiver_identity = await self.graph.identity_for(receiver_user_id)
        invite = await self.graph.find_pending_invite(invite_id, receiver_identity.id)
        if invite.status != ContactStatus.PENDING:
            raise InviteNotPendingError()

        # The in-memory status can be stale; the UPDATE only matches a PENDING row
        async with transaction(self.db):
            resolved = await self.graph.contacts.resolve_pending(invite, status)
        if not resolved:
            raise InviteNotPendingError()

        logger.info(f"Invite {invite.id} {status.value.lower()} by user {receiver_user_id}")
        return invite

    async def list_invites(self, receiver_user_id: str) -> List[Contact]:
        """Every invite addressed to the user, any status, oldest first."""
        receiver_identity = await self.graph.identity_for(receiver_user_id)
        return await self.graph.contacts.list_for_receiver(receiver_identity.id)

    async def publish_profile(self, user_id: str, username: str, avatar: Optional[str]) -> UserContact:
        async with transaction(self.db):
            identity = await self.graph.publish_identity(user_id, username, avatar)
        return identity
