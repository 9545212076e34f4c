from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.auth.dependencies import get_caller, Caller
from projecthub.schemas.chat_schema import ChatMessageCreate
from projecthub.utils import chat_service
from projecthub.utils.project_service import get_project_or_404
from projecthub.utils.utils import chat_to_dict

router = APIRouter(prefix="/projects/{project_id}/chat", tags=["Chat"])

@router.get("")
def get_chat(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Chat history of a project, oldest first.
    """
    project = get_project_or_404(db, project_id)
    messages = chat_service.read_project_chat(db, project, caller)
    return [chat_to_dict(m) for m in messages]

@router.post("")
def send_chat_message(
    project_id: int,
    data: ChatMessageCreate,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    project = get_project_or_404(db, project_id)
    chat = chat_service.post_message(db, project, caller, data.message)
    return chat_to_dict(chat)
