import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, Numeric
from datetime import datetime, timezone

from app.database import Base
from app.schemas.releases import ReleaseStatus, ReleaseType

class Release(Base):
    __tablename__ = "releases"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    value = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=True)
    status = Column(Enum(ReleaseStatus, name="releasestatus"), default=ReleaseStatus.PENDING, nullable=False)
    type = Column(Enum(ReleaseType, name="releasetype"), nullable=False)
    release_date = Column(DateTime(timezone=True), nullable=False)
    category_id = Column(String, ForeignKey("categories.id"), index=True, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
