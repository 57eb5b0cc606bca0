from contextlib import asynccontextmanager

from sqlalchemy import make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from app.config import settings
import logging

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.sqlalchemy_database_url

# Log the connection string (mask password for safety)
masked_url = make_url(SQLALCHEMY_DATABASE_URL).render_as_string(hide_password=True)
logger.info(f"SQLAlchemy DB URL: {masked_url}")

# Create an async engine
engine = create_async_engine(
    SQLALCHEMY_DATABASE_URL
    )

# Objects stay usable after commit; workflows hand them back to the caller
AsyncSessionLocal = async_sessionmaker(autocommit=False, autoflush=False, bind=engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


@asynccontextmanager
async def transaction(db: AsyncSession):
    """
    Run a block of writes as one unit: commit when it completes, roll back
    when anything inside raises, then re-raise.
    """
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
