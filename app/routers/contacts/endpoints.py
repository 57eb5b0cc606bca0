import logging
from typing import List
from fastapi import APIRouter, Depends, status
from app.common import get_current_user
from app.dependencies import get_invite_workflow
from app.schemas.contacts import InviteCreate, InviteResponse, UserContactResponse, UserContactUpdate
from app.services.invite_service import InviteWorkflow

# Configure logging for this module
logger = logging.getLogger(__name__)

# Initialize router with prefix and tags for API documentation
router = APIRouter(prefix="/contacts", tags=["contacts"])

@router.post("/invites", response_model=InviteResponse, status_code=status.HTTP_201_CREATED)
async def send_invite_api(
    request: InviteCreate,
    invites: InviteWorkflow = Depends(get_invite_workflow),
    current_user: dict = Depends(get_current_user)
):
    """
    Invite another user to become a contact.

    Args:
        request: InviteCreate with the receiving user's id
        invites: Invite workflow for this request
        current_user: Currently authenticated user

    Returns:
        InviteResponse: The pending invite
    """
    return await invites.invite(current_user["uid"], request.receiver_user_id)

@router.get("/invites", response_model=List[InviteResponse])
async def list_invites_api(
    invites: InviteWorkflow = Depends(get_invite_workflow),
    current_user: dict = Depends(get_current_user)
):
    """Invites addressed to the current user, any status."""
    return await invites.list_invites(current_user["uid"])

@router.patch("/invites/{invite_id}/accept", response_model=InviteResponse)
async def accept_invite_api(
    invite_id: str,
    invites: InviteWorkflow = Depends(get_invite_workflow),
    current_user: dict = Depends(get_current_user)
):
    return await invites.accept(invite_id, current_user["uid"])

@router.patch("/invites/{invite_id}/refuse", response_model=InviteResponse)
async def refuse_invite_api(
    invite_id: str,
    invites: InviteWorkflow = Depends(get_invite_workflow),
    current_user: dict = Depends(get_current_user)
):
    return await invites.refuse(invite_id, current_user["uid"])

@router.put("/me", response_model=UserContactResponse)
async def publish_profile_api(
    request: UserContactUpdate,
    invites: InviteWorkflow = Depends(get_invite_workflow),
    current_user: dict = Depends(get_current_user)
):
    """Set the public username and avatar other users see on invites."""
    return await invites.publish_profile(current_user["uid"], request.username, request.avatar)
