import logging

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from .common import app
from .init_db import get_db
from .routers.auth.endpoints import router as AuthEndpoints
from .routers.users.endpoints import router as UsersEndpoints
from .routers.contacts.endpoints import router as ContactsEndpoints
from .routers.categories.endpoints import router as CategoriesEndpoints
from .routers.releases.endpoints import router as ReleasesEndpoints

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Include routers
app.include_router(AuthEndpoints)
app.include_router(UsersEndpoints)
app.include_router(ContactsEndpoints)
app.include_router(CategoriesEndpoints)
app.include_router(ReleasesEndpoints)

@app.get("/health")
async def health(db: AsyncSession = Depends(get_db)):
    """Liveness plus a trivial query against the database."""
    result = await db.execute(text("SELECT 1"))
    return {"status": "ok", "database": result.scalar() == 1}
