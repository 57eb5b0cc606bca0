"""
Pytest configuration and fixtures
"""
import os

# Settings are read at import time; point them at throwaway values first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.database import Base
from app.dependencies import build_contact_graph, get_hasher
from app.init_db import get_db
from app.schemas.users import UserCreate
from app.services.account_service import AccountDeps, AccountLifecycle
from app.services.category_service import CategoryManager
from app.services.invite_service import InviteWorkflow
from app.services.notification_service import get_notifier
from app.services.release_service import CashFlow
from app.services.user_service import UserDirectory
from app.services.verification_code_service import VerificationCodeManager, VerificationCodeStore


class FakeHasher:
    """Deterministic stand-in for the passlib hasher."""

    def hash(self, plaintext: str) -> str:
        return f"hashed::{plaintext}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == self.hash(plaintext)


class RecordingNotifier:
    """Keeps every message instead of sending it."""

    def __init__(self):
        self.activations = []
        self.recoveries = []

    async def send_activation(self, user, code):
        self.activations.append((user.email, code))

    async def send_recovery(self, user, code):
        self.recoveries.append((user.email, code))

    def last_activation_code(self):
        return self.activations[-1][1]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    """A fresh database session per test."""
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    return FakeHasher()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def code_store(db):
    return VerificationCodeStore(db)


@pytest.fixture
def codes(code_store):
    return VerificationCodeManager(code_store)


@pytest.fixture
def accounts(db, code_store, codes, hasher, notifier):
    return AccountLifecycle(
        AccountDeps(
            db=db,
            users=UserDirectory(db),
            code_store=code_store,
            codes=codes,
            contacts=build_contact_graph(db),
            hasher=hasher,
            notifier=notifier,
        )
    )


@pytest.fixture
def invites(db):
    return InviteWorkflow(db, UserDirectory(db), build_contact_graph(db))


@pytest.fixture
def categories(db):
    return CategoryManager(db, UserDirectory(db))


@pytest.fixture
def cash_flow(db, categories):
    return CashFlow(db, UserDirectory(db), categories)


@pytest.fixture
def register(accounts, notifier):
    """Factory creating users, activated unless told otherwise."""

    async def _register(email, password="secret-password", active=True, first_name="Ana", last_name="Souza"):
        user = await accounts.create_account(
            UserCreate(email=email, first_name=first_name, last_name=last_name, password=password)
        )
        if active:
            user = await accounts.activate_account(notifier.last_activation_code())
        return user

    return _register


@pytest_asyncio.fixture
async def client(db, hasher, notifier):
    from app.main import app

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_hasher] = lambda: hasher
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
