import logging
from typing import List
from fastapi import APIRouter, Depends, status
from app.common import get_current_user
from app.dependencies import get_cash_flow
from app.schemas.releases import ReleaseCreate, ReleaseResponse
from app.services.release_service import CashFlow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/releases", tags=["releases"])

@router.post("", response_model=ReleaseResponse, status_code=status.HTTP_201_CREATED)
async def create_release_api(
    request: ReleaseCreate,
    cash_flow: CashFlow = Depends(get_cash_flow),
    current_user: dict = Depends(get_current_user)
):
    """
    Record an income or expense for the current user.

    Raises:
        CategoryNotFoundError: If the category is not the user's (400)
    """
    return await cash_flow.create_release(request, current_user["uid"])

@router.get("", response_model=List[ReleaseResponse])
async def list_releases_api(
    cash_flow: CashFlow = Depends(get_cash_flow),
    current_user: dict = Depends(get_current_user)
):
    return await cash_flow.list_releases(current_user["uid"])
