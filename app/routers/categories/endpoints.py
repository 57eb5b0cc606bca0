import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from app.common import get_current_user
from app.dependencies import get_category_manager
from app.schemas.categories import CategoryCreate, CategoryResponse, CategoryUpdate
from app.services.category_service import CategoryManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category_api(
    request: CategoryCreate,
    categories: CategoryManager = Depends(get_category_manager),
    current_user: dict = Depends(get_current_user)
):
    return await categories.create(request.description, current_user["uid"])

@router.get("", response_model=List[CategoryResponse])
async def list_categories_api(
    description: Optional[str] = None,
    categories: CategoryManager = Depends(get_category_manager),
    current_user: dict = Depends(get_current_user)
):
    """
    List the current user's categories.

    Args:
        description: Optional fragment the description must contain
    """
    return await categories.list(current_user["uid"], description)

@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category_api(
    category_id: str,
    request: CategoryUpdate,
    categories: CategoryManager = Depends(get_category_manager),
    current_user: dict = Depends(get_current_user)
):
    return await categories.update(category_id, request.description, current_user["uid"])
