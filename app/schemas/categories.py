from pydantic import BaseModel, Field
from datetime import datetime

class CategoryBase(BaseModel):
    description: str = Field(min_length=1)

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(CategoryBase):
    pass

class CategoryResponse(CategoryBase):
    id: str
    user_id: str
    created_at: datetime

    class Config:
        from_attributes = True
