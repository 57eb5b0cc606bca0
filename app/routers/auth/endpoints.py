import logging
from fastapi import APIRouter, Depends, HTTPException, status
from app.core.security import PasswordHasher, create_access_token
from app.dependencies import get_account_lifecycle, get_hasher
from app.errors import SubjectNotFoundError
from app.schemas.users import LoginRequest, TokenResponse
from app.services.account_service import AccountLifecycle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login_api(
    request: LoginRequest,
    accounts: AccountLifecycle = Depends(get_account_lifecycle),
    hasher: PasswordHasher = Depends(get_hasher)
):
    """
    Exchange email and password for a bearer access token.

    Raises:
        HTTPException: 401 on unknown email, wrong password or inactive account
    """
    try:
        subject = await accounts.load_credential_subject(request.email)
    except SubjectNotFoundError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if not hasher.verify(request.password, subject.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    if not subject.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account is not active")

    logger.info(f"User {subject.user_id} logged in")
    return TokenResponse(access_token=create_access_token(subject.user_id, subject.email))
