from typing import List, Optional

from sqlalchemy.orm import Session

from projecthub.models import ProjectChat, Project
from projecthub.constants import ErrorMessages
from projecthub.exceptions import raise_bad_request
from projecthub.auth.dependencies import Caller
from projecthub.auth.permissions import require_project_role


def get_chat_history(db: Session, project_id: int, limit: Optional[int] = None) -> List[ProjectChat]:
    """
    Messages of a project, oldest first.
    """
    query = (
        db.query(ProjectChat)
        .filter(ProjectChat.project_id == project_id)
        .order_by(ProjectChat.created_at.asc(), ProjectChat.id.asc())
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def read_project_chat(db: Session, project: Project, caller: Caller) -> List[ProjectChat]:
    require_project_role(project, caller.id, ErrorMessages.NOT_PROJECT_MEMBER)
    return get_chat_history(db, project.id)


def post_message(db: Session, project: Project, caller: Caller, message: Optional[str]) -> ProjectChat:
    if not message or not message.strip():
        raise_bad_request(ErrorMessages.MESSAGE_REQUIRED)
    require_project_role(project, caller.id, ErrorMessages.NOT_PROJECT_MEMBER)

    chat = ProjectChat(
        project_id=project.id,
        sender_id=caller.id,
        sender_name=caller.name,
        message=message,
    )
    db.add(chat)
    db.flush()
    return chat
