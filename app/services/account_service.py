import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import PasswordHasher
from app.database import transaction
from app.errors import DuplicateEmailError, InvalidCodeError, SubjectNotFoundError, UserNotFoundError
from app.models import User
from app.schemas.users import CredentialSubject, UserCreate
from app.services.contact_service import ContactGraph
from app.services.notification_service import Notifier
from app.services.user_service import UserDirectory, normalize_email
from app.services.verification_code_service import VerificationCodeManager, VerificationCodeStore

logger = logging.getLogger(__name__)


@dataclass
class AccountDeps:
    """Collaborators of the account lifecycle, built once per request."""
    db: AsyncSession
    users: UserDirectory
    code_store: VerificationCodeStore
    codes: VerificationCodeManager
    contacts: ContactGraph
    hasher: PasswordHasher
    notifier: Notifier


class AccountLifecycle:
    """
    Registration, activation and password recovery of user accounts.

    Emails are sent only after the state change they announce is committed.
    """

    def __init__(self, deps: AccountDeps):
        self.deps = deps

    async def create_account(self, candidate: UserCreate) -> User:
        """
        Register a new, inactive user and send the activation email.

        Args:
            candidate: UserCreate - Email, names and plaintext password

        Returns:
            User: The persisted user, inactive, password replaced by its hash

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        deps = self.deps
        email = normalize_email(candidate.email)
        if await deps.users.get_by_email(email) is not None:
            logger.info(f"Registration refused, email already registered: {email}")
            raise DuplicateEmailError()

        async with transaction(deps.db):
            user = User(
                email=email,
                first_name=candidate.first_name,
                last_name=candidate.last_name,
                password=deps.hasher.hash(candidate.password),
                is_active=False
            )
            try:
                user = await deps.users.save(user)
            except IntegrityError as e:
                # Lost a race against a concurrent registration
                raise DuplicateEmailError() from e
            code = await deps.codes.issue(user)

        logger.info(f"Created account {user.id} for {email}")
        await self._notify(deps.notifier.send_activation, user, code)
        return user

    async def activate_account(self, code_id: str) -> User:
        """
        Activate the user a verification code belongs to.

        The code is looked up by id only; its valid flag is not checked.
        Using it invalidates it and gives the user a contact identity.

        Raises:
            InvalidCodeError: If the code or its user cannot be found
        """
        deps = self.deps
        code = await deps.code_store.get_by_id(code_id)
        if code is None:
            raise InvalidCodeError()
        user = await deps.users.get_by_id(code.user_id)
        if user is None:
            raise InvalidCodeError()

        async with transaction(deps.db):
            if not user.is_active:
                user.is_active = True
                user = await deps.users.update(user, user.id)
                logger.info(f"Activated account {user.id}")
            await deps.codes.invalidate(code)
            await deps.contacts.ensure_identity(user)

        return user

    async def initiate_password_recovery(self, email: str) -> None:
        """
        Send a recovery code to an active user.

        Unknown or inactive emails are ignored without any error, so the
        response never reveals whether an account exists.
        """
        deps = self.deps
        user = await deps.users.get_active_by_email(email)
        if user is None:
            logger.info("Password recovery requested for an unknown email")
            return

        async with transaction(deps.db):
            code = await deps.codes.issue(user)

        await self._notify(deps.notifier.send_recovery, user, code)

    async def load_credential_subject(self, email: str) -> CredentialSubject:
        user = await self.deps.users.get_by_email(email)
        if user is None:
            raise SubjectNotFoundError()
        return CredentialSubject(
            user_id=user.id,
            email=user.email,
            password_hash=user.password,
            is_active=user.is_active
        )

    async def get_account(self, user_id: str) -> User:
        user = await self.deps.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def _notify(self, send, user: User, code: str) -> None:
        # The change is already committed; a failed email must not surface as an error
        try:
            await send(user, code)
        except Exception as e:
            logger.error(f"Failed to notify {user.email}: {str(e)}")
