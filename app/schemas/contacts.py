from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum as PyEnum

class ContactStatus(str, PyEnum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REFUSED = "REFUSED"

class InviteCreate(BaseModel):
    receiver_user_id: str

class UserContactUpdate(BaseModel):
    username: str
    avatar: Optional[str] = None

class UserContactResponse(BaseModel):
    id: str
    user_id: str
    username: Optional[str] = None
    avatar: Optional[str] = None

    class Config:
        from_attributes = True

class InviteResponse(BaseModel):
    id: str
    requester_contact_id: str
    receiver_contact_id: str
    status: ContactStatus
    created_at: datetime
    resolved_at: Optional[datetime] = None
    requester: Optional[UserContactResponse] = None

    class Config:
        from_attributes = True
