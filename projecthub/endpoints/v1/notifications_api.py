from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.auth.dependencies import get_caller, Caller
from projecthub.models import Notification
from projecthub.schemas.user_schema import NotificationCount
from projecthub.constants import ErrorMessages, SuccessMessages
from projecthub.enums import ErrorCode
from projecthub.exceptions import raise_not_found
from projecthub.utils import notification_service
from projecthub.utils.utils import notification_to_dict

router = APIRouter(prefix="/notifications", tags=["Notifications"])

@router.get("")
def get_notifications(
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Latest notifications of the caller, newest first.
    """
    notifications = notification_service.get_latest_notifications(db, caller.id)
    return [notification_to_dict(n) for n in notifications]

@router.get("/unread-count", response_model=NotificationCount)
def get_unread_count(
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    return {"unread_count": notification_service.count_unread(db, caller.id)}

@router.put("/{notification_id}/read")
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    notification = db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.user_id == caller.id
    ).first()
    if not notification:
        raise_not_found(ErrorMessages.NOTIFICATION_NOT_FOUND, ErrorCode.NOTIFICATION_NOT_FOUND)

    notification.is_read = True
    return {"message": SuccessMessages.NOTIFICATION_READ}
