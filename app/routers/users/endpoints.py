import logging
from fastapi import APIRouter, Depends, status
from app.common import get_current_user
from app.dependencies import get_account_lifecycle
from app.schemas.users import MessageResponse, PasswordRecoveryRequest, UserCreate, UserResponse
from app.services.account_service import AccountLifecycle

# Configure logging for the module
logger = logging.getLogger(__name__)

# Initialize router with prefix and tags for API documentation
router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user_api(
    request: UserCreate,
    accounts: AccountLifecycle = Depends(get_account_lifecycle)
):
    """
    Register a new account and send its activation email.

    Args:
        request: UserCreate with email, names and password
        accounts: Account lifecycle for this request

    Returns:
        UserResponse: The created, still inactive user

    Raises:
        DuplicateEmailError: If the email is already registered (400)
    """
    return await accounts.create_account(request)

@router.get("/activate/{code_id}", response_model=UserResponse)
async def activate_user_api(
    code_id: str,
    accounts: AccountLifecycle = Depends(get_account_lifecycle)
):
    """
    Activate the account a verification code was issued for.

    Raises:
        InvalidCodeError: If the code cannot be resolved (400)
    """
    return await accounts.activate_account(code_id)

@router.post("/password-recovery", response_model=MessageResponse, status_code=status.HTTP_202_ACCEPTED)
async def password_recovery_api(
    request: PasswordRecoveryRequest,
    accounts: AccountLifecycle = Depends(get_account_lifecycle)
):
    # Same answer whether or not the account exists
    await accounts.initiate_password_recovery(request.email)
    return MessageResponse(message="If the email belongs to an active account, a recovery email was sent")

@router.get("/me", response_model=UserResponse)
async def get_current_user_info_api(
    current_user: dict = Depends(get_current_user),
    accounts: AccountLifecycle = Depends(get_account_lifecycle)
):
    return await accounts.get_account(current_user["uid"])
