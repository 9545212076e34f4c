from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.models import User
from projecthub.auth.dependencies import get_current_user, get_caller, Caller
from projecthub.schemas.project_schema import ManagerSetupRequest
from projecthub.constants import SuccessMessages
from projecthub.utils import project_service
from projecthub.utils.dashboard_service import build_member_roster
from projecthub.utils.mail_service import queue_invite_email
from projecthub.utils.upload_service import build_member_detail
from projecthub.utils.utils import project_to_dict

router = APIRouter(prefix="/projects", tags=["Projects"])

@router.post("")
def create_project(
    background_tasks: BackgroundTasks,
    title: str = Form(...),
    description: Optional[str] = Form(None),
    manager_email: str = Form(..., alias="managerEmail"),
    requirement_pdf: Optional[UploadFile] = File(None, alias="requirementPdf"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """
    Creates a project owned by the caller and invites its manager.
    Accepts an optional requirement document.
    """
    project, manager = project_service.create_project(
        db, user, title, description, manager_email, requirement_pdf
    )
    queue_invite_email(
        background_tasks,
        manager.email,
        f'Invitation to manage "{project.title}"',
        f'{user.name} invited you to manage project "{project.title}". '
        f'Log in to accept or reject the invite.',
    )
    return {"message": SuccessMessages.PROJECT_CREATED, "projectId": project.id}

@router.get("/{project_id}")
def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    project = project_service.get_project_or_404(db, project_id)
    return project_to_dict(project)

@router.put("/{project_id}/accept")
def accept_project(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Invited manager accepts the project; it becomes active.
    """
    project = project_service.get_project_or_404(db, project_id)
    project_service.accept_manager_invite(db, project, caller.id)
    return {
        "message": SuccessMessages.PROJECT_ACCEPTED,
        "redirect": f"manager-setup.html?projectId={project.id}",
    }

@router.put("/{project_id}/reject")
def reject_project(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    project = project_service.get_project_or_404(db, project_id)
    project_service.reject_manager_invite(db, project, caller.id)
    return {"message": SuccessMessages.PROJECT_REJECTED}

@router.delete("/{project_id}")
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Deletes a project with its tasks and notifications.
    Restricted to the owner.
    """
    project = project_service.get_project_or_404(db, project_id)
    project_service.delete_project(db, project, caller.id)
    return {"message": SuccessMessages.PROJECT_DELETED}

@router.post("/{project_id}/manager-setup")
def manager_setup(
    project_id: int,
    setup: ManagerSetupRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Replaces the team and assigns a new batch of tasks.
    Restricted to the project manager.
    """
    project = project_service.get_project_or_404(db, project_id)
    result = project_service.run_manager_setup(db, project, caller.id, setup)

    for member, role in result["invited"]:
        queue_invite_email(
            background_tasks,
            member.email,
            f'You were added to "{project.title}"',
            f'You were added to project "{project.title}" as {role.replace("_", " ")}.',
        )

    return {
        "message": SuccessMessages.SETUP_COMPLETED,
        "teamSize": len(result["invited"]),
        "tasksCreated": len(result["tasks"]),
    }

@router.put("/{project_id}/team/accept")
def accept_team_invite(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    project = project_service.get_project_or_404(db, project_id)
    project_service.accept_team_invite(db, project, caller.id)
    return {
        "message": SuccessMessages.TEAM_ACCEPTED,
        "redirect": f"member-dashboard.html?projectId={project.id}",
    }

@router.put("/{project_id}/team/reject")
def reject_team_invite(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    project = project_service.get_project_or_404(db, project_id)
    project_service.reject_team_invite(db, project, caller.id)
    return {"message": SuccessMessages.TEAM_REJECTED}

@router.get("/{project_id}/members")
def get_project_members(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Roster with per-member progress.
    """
    project = project_service.get_project_or_404(db, project_id)
    return build_member_roster(db, project)

@router.get("/{project_id}/members/{member_id}/detail")
def get_member_detail(
    project_id: int,
    member_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Uploads and tasks of one member.
    Restricted to the owner and manager.
    """
    project = project_service.get_project_or_404(db, project_id)
    return build_member_detail(db, project, caller.id, member_id)
