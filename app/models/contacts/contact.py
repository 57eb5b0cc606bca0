import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, Index, text
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from app.database import Base
from app.schemas.contacts import ContactStatus

class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    requester_contact_id = Column(String, ForeignKey("user_contacts.id"), index=True, nullable=False)
    receiver_contact_id = Column(String, ForeignKey("user_contacts.id"), index=True, nullable=False)
    status = Column(Enum(ContactStatus, name="contactstatus"), default=ContactStatus.PENDING, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    resolved_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    requester = relationship("UserContact", foreign_keys=[requester_contact_id], lazy="selectin")
    receiver = relationship("UserContact", foreign_keys=[receiver_contact_id], lazy="selectin")

    # One outstanding invite per ordered pair
    __table_args__ = (
        Index(
            "uq_contacts_pending_pair",
            "requester_contact_id",
            "receiver_contact_id",
            unique=True,
            postgresql_where=text("status = 'PENDING'"),
            sqlite_where=text("status = 'PENDING'"),
        ),
    )
