import uuid
from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, Index, text
from datetime import datetime, timezone

from app.database import Base

class VerificationCode(Base):
    __tablename__ = "verification_codes"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    is_valid = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # At most one valid code per user
    __table_args__ = (
        Index(
            "uq_verification_codes_valid_user",
            "user_id",
            unique=True,
            postgresql_where=text("is_valid"),
            sqlite_where=text("is_valid = 1"),
        ),
    )

    def disable(self):
        self.is_valid = False
        return self
