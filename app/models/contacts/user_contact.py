import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey
from datetime import datetime, timezone

from app.database import Base

class UserContact(Base):
    __tablename__ = "user_contacts"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), unique=True, index=True, nullable=False)
    username = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
