from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from projecthub.models import MemberUpload, Project
from projecthub.constants import ErrorMessages
from projecthub.exceptions import raise_bad_request, raise_forbidden
from projecthub.auth.permissions import require_project_role, is_owner_or_manager
from projecthub.utils.common import save_uploaded_file, remove_stored_file, build_file_url
from projecthub.utils.task_service import get_member_tasks
from projecthub.utils.utils import upload_to_dict
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def record_upload(
    db: Session,
    project: Project,
    member_id: int,
    file: Optional[UploadFile],
    sprint_label: Optional[str] = None,
    note: Optional[str] = None,
) -> MemberUpload:
    """
    Stores a sprint artifact for a project member and records it in the ledger.
    """
    require_project_role(project, member_id, ErrorMessages.NOT_PROJECT_MEMBER)
    if file is None or not file.filename:
        raise_bad_request(ErrorMessages.NO_FILE)

    file_path = save_uploaded_file(file)
    upload = MemberUpload(
        project_id=project.id,
        member_id=member_id,
        file_name=file.filename,
        file_path=file_path,
        sprint_label=_clean(sprint_label),
        note=_clean(note),
    )
    try:
        db.add(upload)
        db.flush()
    except Exception:
        remove_stored_file(file_path)
        raise
    logger.info(f"User {member_id} uploaded {file.filename} to project {project.id}")
    return upload


def get_member_uploads(db: Session, project_id: int, member_id: int, newest_first: bool = False) -> List[MemberUpload]:
    if newest_first:
        order = (MemberUpload.created_at.desc(), MemberUpload.id.desc())
    else:
        order = (MemberUpload.created_at.asc(), MemberUpload.id.asc())
    return (
        db.query(MemberUpload)
        .filter(MemberUpload.project_id == project_id, MemberUpload.member_id == member_id)
        .order_by(*order)
        .all()
    )


def build_member_dashboard(db: Session, project: Project, member_id: int) -> dict:
    """
    The caller's own upload history for a project.
    """
    require_project_role(project, member_id, ErrorMessages.NOT_PROJECT_MEMBER)
    uploads = get_member_uploads(db, project.id, member_id)
    return {
        "project": {
            "title": project.title,
            "description": project.description,
        },
        "uploads": [upload_to_dict(u) for u in uploads],
    }


def build_member_detail(db: Session, project: Project, viewer_id: int, member_id: int) -> dict:
    """
    Uploads and tasks of one member, visible to the owner and manager only.
    """
    if not is_owner_or_manager(project, viewer_id):
        raise_forbidden(ErrorMessages.ONLY_OWNER_OR_MANAGER)

    uploads = get_member_uploads(db, project.id, member_id, newest_first=True)
    tasks = get_member_tasks(db, project.id, member_id)
    return {
        "uploads": [
            {
                "fileName": u.file_name,
                "sprintLabel": u.sprint_label,
                "note": u.note,
                "uploadedAt": u.created_at,
                "url": build_file_url(u.file_path),
            }
            for u in uploads
        ],
        "tasks": [
            {
                "id": t.id,
                "title": t.title,
                "status": t.status,
                "lastUpdate": t.updated_at,
            }
            for t in tasks
        ],
    }
