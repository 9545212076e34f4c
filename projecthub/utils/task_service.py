from typing import List

from sqlalchemy.orm import Session

from projecthub.models import Task
from projecthub.constants import ErrorMessages
from projecthub.enums import TaskStatus
from projecthub.exceptions import raise_task_not_found, raise_forbidden
from projecthub.auth.permissions import resolve_role, can_update_task
from projecthub.utils.project_service import get_project_or_404
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)


def get_task_or_404(db: Session, task_id: int) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise_task_not_found()
    return task


def update_task_status(db: Session, task_id: int, new_status: TaskStatus, user_id: int) -> Task:
    """
    Writes a new status if the caller is the project's manager or a scrum master.
    Any status may move to any other; there is no workflow ordering.
    """
    task = get_task_or_404(db, task_id)
    project = get_project_or_404(db, task.project_id)

    role = resolve_role(project, user_id)
    if not can_update_task(role):
        logger.warning(f"User {user_id} ({role.value if role else 'no role'}) blocked from updating task {task_id}")
        raise_forbidden(ErrorMessages.ONLY_TASK_EDITORS)

    task.status = new_status.value
    db.flush()
    logger.info(f"Task {task_id} set to {new_status.value} by user {user_id}")
    return task


def get_project_tasks(db: Session, project_id: int) -> List[Task]:
    return db.query(Task).filter(Task.project_id == project_id).order_by(Task.id).all()


def get_member_tasks(db: Session, project_id: int, member_id: int) -> List[Task]:
    return (
        db.query(Task)
        .filter(Task.project_id == project_id, Task.assigned_to == member_id)
        .order_by(Task.id)
        .all()
    )


def get_assigned_tasks(db: Session, user_id: int) -> List[Task]:
    return (
        db.query(Task)
        .filter(Task.assigned_to == user_id)
        .order_by(Task.updated_at.desc(), Task.id.desc())
        .all()
    )
