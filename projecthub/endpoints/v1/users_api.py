from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.auth.dependencies import get_caller, Caller
from projecthub.schemas.user_schema import UserSearchResult
from projecthub.utils.user_service import search_users_by_email

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("/search", response_model=List[UserSearchResult])
def search_users(
    query: str = "",
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    return search_users_by_email(db, query)
