from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.models import User
from projecthub.config.settings import settings
from projecthub.constants import ErrorMessages
from projecthub.exceptions import raise_unauthorized
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Caller:
    """Verified identity of the user making the request."""
    id: int
    name: str
    email: str


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
):
    """
    Dependency to get the current authenticated user from JWT token.
    
    Args:
        credentials: Bearer token credentials
        db: Database session
        
    Returns:
        User: The authenticated user instance
        
    Raises:
        BaseAPIException: If token is missing, invalid or user not found
    """
    if credentials is None:
        raise_unauthorized(ErrorMessages.NO_TOKEN)

    token = credentials.credentials
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        user_id = payload.get("user_id")
        if not user_id:
            raise_unauthorized(ErrorMessages.INVALID_TOKEN)
    except JWTError:
        logger.warning("Rejected request with an invalid token")
        raise_unauthorized(ErrorMessages.INVALID_TOKEN)

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise_unauthorized(ErrorMessages.INVALID_TOKEN)

    return user


def get_caller(user: User = Depends(get_current_user)) -> Caller:
    return Caller(id=user.id, name=user.name, email=user.email)
