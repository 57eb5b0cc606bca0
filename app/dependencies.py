from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import PasslibHasher, PasswordHasher
from app.init_db import get_db
from app.services.account_service import AccountDeps, AccountLifecycle
from app.services.category_service import CategoryManager
from app.services.contact_service import ContactGraph, ContactStore, UserContactStore
from app.services.invite_service import InviteWorkflow
from app.services.notification_service import Notifier, get_notifier
from app.services.release_service import CashFlow
from app.services.user_service import UserDirectory
from app.services.verification_code_service import VerificationCodeManager, VerificationCodeStore


@lru_cache
def get_hasher() -> PasswordHasher:
    return PasslibHasher()


def build_contact_graph(db: AsyncSession) -> ContactGraph:
    return ContactGraph(UserContactStore(db), ContactStore(db))


def get_account_lifecycle(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
    notifier: Notifier = Depends(get_notifier)
) -> AccountLifecycle:
    code_store = VerificationCodeStore(db)
    return AccountLifecycle(
        AccountDeps(
            db=db,
            users=UserDirectory(db),
            code_store=code_store,
            codes=VerificationCodeManager(code_store),
            contacts=build_contact_graph(db),
            hasher=hasher,
            notifier=notifier
        )
    )


def get_invite_workflow(db: AsyncSession = Depends(get_db)) -> InviteWorkflow:
    return InviteWorkflow(db, UserDirectory(db), build_contact_graph(db))


def get_category_manager(db: AsyncSession = Depends(get_db)) -> CategoryManager:
    return CategoryManager(db, UserDirectory(db))


def get_cash_flow(db: AsyncSession = Depends(get_db)) -> CashFlow:
    users = UserDirectory(db)
    return CashFlow(db, users, CategoryManager(db, users))
