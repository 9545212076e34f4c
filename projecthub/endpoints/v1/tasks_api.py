from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.auth.dependencies import get_caller, Caller
from projecthub.schemas.task_schema import TaskStatusUpdate
from projecthub.constants import SuccessMessages
from projecthub.utils import task_service
from projecthub.utils.utils import task_to_dict

router = APIRouter(prefix="/tasks", tags=["Tasks"])

@router.put("/{task_id}")
def update_task(
    task_id: int,
    update: TaskStatusUpdate,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Updates a task's status.
    Restricted to the project manager and scrum masters.
    """
    task = task_service.update_task_status(db, task_id, update.status, caller.id)
    return {"message": SuccessMessages.TASK_UPDATED, "task": task_to_dict(task)}
