from pydantic import BaseModel

from projecthub.enums import TaskStatus

class TaskStatusUpdate(BaseModel):
    status: TaskStatus
