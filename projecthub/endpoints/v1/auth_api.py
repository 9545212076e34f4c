from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.models import User
from projecthub.schemas.auth_schema import SignupRequest, LoginRequest, TokenResponse
from projecthub.auth.auth_utils import hash_password, verify_password, create_access_token
from projecthub.constants import ErrorMessages, SuccessMessages
from projecthub.enums import ErrorCode
from projecthub.exceptions import raise_bad_request, raise_api_error
from projecthub.utils.user_service import get_user_by_email, normalize_email
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/signup")
def signup(
    data: SignupRequest,
    db: Session = Depends(get_db)
):
    """
    Registers a new user account.
    """
    if not data.email.strip() or not data.password:
        raise_bad_request("Email and password are required")

    if get_user_by_email(db, data.email):
        raise_bad_request(ErrorMessages.USER_EXISTS)

    user = User(
        name=data.name,
        phone=data.phone,
        email=normalize_email(data.email),
        hashed_password=hash_password(data.password),
    )
    db.add(user)
    db.flush()
    logger.info(f"User {user.id} signed up")
    return {"message": SuccessMessages.SIGNUP}

@router.post("/login", response_model=TokenResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Exchanges credentials for a bearer token.
    """
    user = get_user_by_email(db, data.email)
    if not user or not verify_password(data.password, user.hashed_password):
        raise_api_error(401, ErrorMessages.INVALID_CREDENTIALS, ErrorCode.INVALID_CREDENTIALS)

    return {"token": create_access_token(user.id)}
