from .user import User
from .verification_code import VerificationCode
from .contacts.user_contact import UserContact
from .contacts.contact import Contact
from .category import Category
from .release import Release

__all__ = ["User", "VerificationCode", "UserContact", "Contact", "Category", "Release"]
