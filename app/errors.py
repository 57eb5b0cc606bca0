from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CODE = "invalid_code"
    SUBJECT_NOT_FOUND = "subject_not_found"
    SELF_INVITE_NOT_ALLOWED = "self_invite_not_allowed"
    REQUESTER_NOT_FOUND = "requester_not_found"
    CONTACT_IDENTITY_NOT_FOUND = "contact_identity_not_found"
    INVITE_NOT_FOUND = "invite_not_found"
    INVITE_ALREADY_PENDING = "invite_already_pending"
    INVITE_NOT_PENDING = "invite_not_pending"
    USER_NOT_FOUND = "user_not_found"
    CATEGORY_NOT_FOUND = "category_not_found"


class DomainError(Exception):
    """
    Base class for every failure a workflow reports to its caller.

    Callers branch on ``kind``; ``message`` is for humans only.
    """
    kind: ErrorKind
    message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class DuplicateEmailError(DomainError):
    kind = ErrorKind.DUPLICATE_EMAIL
    message = "Email is already registered"


class InvalidCodeError(DomainError):
    kind = ErrorKind.INVALID_CODE
    message = "Invalid verification code"


class SubjectNotFoundError(DomainError):
    kind = ErrorKind.SUBJECT_NOT_FOUND
    message = "User not found"


class SelfInviteNotAllowedError(DomainError):
    kind = ErrorKind.SELF_INVITE_NOT_ALLOWED
    message = "Users cannot invite themselves"


class RequesterNotFoundError(DomainError):
    kind = ErrorKind.REQUESTER_NOT_FOUND
    message = "User requesting the invite was not found"


class ContactIdentityNotFoundError(DomainError):
    kind = ErrorKind.CONTACT_IDENTITY_NOT_FOUND
    message = "Contact not found"


class InviteNotFoundError(DomainError):
    kind = ErrorKind.INVITE_NOT_FOUND
    message = "Invite not found"


class InviteAlreadyPendingError(DomainError):
    kind = ErrorKind.INVITE_ALREADY_PENDING
    message = "An invite to this contact is already pending"


class InviteNotPendingError(DomainError):
    kind = ErrorKind.INVITE_NOT_PENDING
    message = "Invite is not pending"


class UserNotFoundError(DomainError):
    kind = ErrorKind.USER_NOT_FOUND
    message = "User not found"


class CategoryNotFoundError(DomainError):
    kind = ErrorKind.CATEGORY_NOT_FOUND
    message = "Category not found"
