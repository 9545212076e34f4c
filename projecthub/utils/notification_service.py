from typing import List, Optional

from sqlalchemy.orm import Session

from projecthub.models import Notification
from projecthub.constants import NOTIFICATION_LIMIT
from projecthub.enums import NotificationType


def create_notification(
    db: Session,
    user_id: int,
    project_id: int,
    type: NotificationType,
    message: str,
    task_id: Optional[int] = None,
) -> Notification:
    """
    Adds a notification to the user's inbox within the current unit of work.
    """
    notification = Notification(
        user_id=user_id,
        project_id=project_id,
        task_id=task_id,
        type=type.value,
        message=message,
    )
    db.add(notification)
    return notification


def notify_project_invite(db: Session, manager_id: int, project_id: int, title: str) -> Notification:
    return create_notification(
        db,
        manager_id,
        project_id,
        NotificationType.PROJECT_INVITE,
        f'You have been invited to manage project "{title}"',
    )


def notify_team_add(db: Session, user_id: int, project_id: int, title: str, role: str) -> Notification:
    return create_notification(
        db,
        user_id,
        project_id,
        NotificationType.TEAM_ADD,
        f'You were added to project "{title}" as {role.replace("_", " ")}',
    )


def notify_task_assigned(db: Session, user_id: int, project_id: int, task_id: int, task_title: str, project_title: str) -> Notification:
    return create_notification(
        db,
        user_id,
        project_id,
        NotificationType.TASK_ASSIGN,
        f'Task assigned: "{task_title}" in project "{project_title}"',
        task_id=task_id,
    )


def get_latest_notifications(db: Session, user_id: int, limit: int = NOTIFICATION_LIMIT) -> List[Notification]:
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(limit)
        .all()
    )


def count_unread(db: Session, user_id: int) -> int:
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
        .count()
    )
