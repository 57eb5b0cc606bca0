from .user_service import UserDirectory, normalize_email
from .verification_code_service import VerificationCodeManager, VerificationCodeStore
from .contact_service import ContactGraph, ContactStore, UserContactStore
from .account_service import AccountDeps, AccountLifecycle
from .invite_service import InviteWorkflow
from .category_service import CategoryManager
from .release_service import CashFlow

__all__ = ["UserDirectory", "normalize_email", "VerificationCodeManager", "VerificationCodeStore", "ContactGraph", "ContactStore", "UserContactStore", "AccountDeps", "AccountLifecycle", "InviteWorkflow", "CategoryManager", "CashFlow"]
