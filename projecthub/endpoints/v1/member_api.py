from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.auth.dependencies import get_caller, Caller
from projecthub.constants import SuccessMessages
from projecthub.utils import upload_service
from projecthub.utils.project_service import get_project_or_404
from projecthub.utils.utils import upload_to_dict

router = APIRouter(prefix="/projects/{project_id}/member", tags=["Member"])

@router.post("/uploads")
def upload_member_file(
    project_id: int,
    file: Optional[UploadFile] = File(None),
    sprint_label: Optional[str] = Form(None, alias="sprintLabel"),
    note: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Uploads a sprint artifact for the caller.
    """
    project = get_project_or_404(db, project_id)
    upload = upload_service.record_upload(db, project, caller.id, file, sprint_label, note)
    return {"message": SuccessMessages.UPLOAD_SUCCESSFUL, "upload": upload_to_dict(upload)}

@router.get("/dashboard")
def get_member_dashboard(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    project = get_project_or_404(db, project_id)
    return upload_service.build_member_dashboard(db, project, caller.id)
