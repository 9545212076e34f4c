from typing import List, Optional

from sqlalchemy.orm import Session

from projecthub.models import User
from projecthub.constants import USER_SEARCH_LIMIT


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_users_by_email(db: Session, query: str, limit: int = USER_SEARCH_LIMIT) -> List[User]:
    """
    Case-insensitive substring match on email. LIKE wildcards in the
    query are matched literally.
    """
    pattern = f"%{escape_like(query.strip())}%"
    return (
        db.query(User)
        .filter(User.email.ilike(pattern, escape="\\"))
        .order_by(User.email)
        .limit(limit)
        .all()
    )
