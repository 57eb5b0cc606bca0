from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum as PyEnum

class ReleaseStatus(str, PyEnum):
    PENDING = "PENDING"
    PAID = "PAID"

class ReleaseType(str, PyEnum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

class ReleaseCreate(BaseModel):
    value: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    description: Optional[str] = None
    status: ReleaseStatus = ReleaseStatus.PENDING
    type: ReleaseType
    release_date: datetime
    category_id: str

class ReleaseResponse(ReleaseCreate):
    id: str
    user_id: str
    created_at: datetime

    class Config:
        from_attributes = True
