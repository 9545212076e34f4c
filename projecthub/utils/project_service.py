from typing import List, Optional, Tuple

from fastapi import UploadFile
from sqlalchemy import or_
from sqlalchemy.orm import Session

from projecthub.models import Project, ProjectMember, Task, Notification, User
from projecthub.constants import ErrorMessages
from projecthub.enums import InviteStatus, ProjectStatus, ErrorCode
from projecthub.exceptions import (
    raise_forbidden, raise_not_found, raise_project_not_found,
    raise_invite_not_found, raise_invalid_transition
)
from projecthub.schemas.project_schema import ManagerSetupRequest
from projecthub.utils.notification_service import (
    notify_project_invite, notify_team_add, notify_task_assigned
)
from projecthub.utils.common import save_uploaded_file, remove_stored_file
from projecthub.utils.user_service import get_user_by_email
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)


def get_project_or_404(db: Session, project_id: int) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise_project_not_found()
    return project


def find_team_entry(project: Project, user_id: int) -> Optional[ProjectMember]:
    for member in project.visible_team:
        if member.user_id == user_id:
            return member
    return None


def get_user_projects(db: Session, user_id: int) -> List[Project]:
    """
    Projects the user owns, manages or is an active team entry of.
    """
    member_project_ids = db.query(ProjectMember.project_id).filter(
        ProjectMember.user_id == user_id,
        ProjectMember.status != InviteStatus.DECLINED.value,
    ).scalar_subquery()
    return (
        db.query(Project)
        .filter(
            or_(
                Project.owner_id == user_id,
                Project.manager_id == user_id,
                Project.id.in_(member_project_ids),
            )
        )
        .order_by(Project.created_at.desc(), Project.id.desc())
        .all()
    )


# --- Manager invite ---

def create_project(
    db: Session,
    owner: User,
    title: str,
    description: Optional[str],
    manager_email: str,
    requirement_file: Optional[UploadFile] = None,
) -> Tuple[Project, User]:
    """
    Creates a project and invites its manager.
    The project row and the invite notification share one transaction.
    The requirement file is written only once the manager is known and
    removed again if the rows cannot be flushed.
    """
    manager = get_user_by_email(db, manager_email)
    if not manager:
        raise_not_found(ErrorMessages.MANAGER_NOT_FOUND, ErrorCode.MANAGER_NOT_FOUND)

    file_path = save_uploaded_file(requirement_file)
    try:
        project = Project(
            title=title,
            description=description,
            owner_id=owner.id,
            manager_id=manager.id,
            manager_status=InviteStatus.PENDING.value,
            status=ProjectStatus.PENDING.value,
            requirement_file_path=file_path,
        )
        db.add(project)
        db.flush()
        notify_project_invite(db, manager.id, project.id, title)
    except Exception:
        remove_stored_file(file_path)
        raise
    logger.info(f"Project {project.id} created by user {owner.id}, manager {manager.id} invited")
    return project, manager


def _require_invited_manager(project: Project, user_id: int):
    if project.manager_id != user_id:
        logger.warning(f"User {user_id} tried to answer manager invite of project {project.id}")
        raise_forbidden(ErrorMessages.ONLY_INVITED_MANAGER)


def accept_manager_invite(db: Session, project: Project, user_id: int) -> Project:
    """
    Invited manager accepts; the project becomes active.
    Accepting again is allowed and changes nothing. A rejected invite is final.
    """
    _require_invited_manager(project, user_id)
    if project.manager_status == InviteStatus.DECLINED.value:
        raise_invalid_transition(ErrorMessages.INVITE_ALREADY_REJECTED)

    project.manager_status = InviteStatus.ACCEPTED.value
    project.status = ProjectStatus.ACTIVE.value
    db.flush()
    logger.info(f"Manager {user_id} accepted project {project.id}")
    return project


def reject_manager_invite(db: Session, project: Project, user_id: int) -> Project:
    _require_invited_manager(project, user_id)
    if project.manager_status == InviteStatus.ACCEPTED.value:
        raise_invalid_transition(ErrorMessages.INVITE_ALREADY_ACCEPTED)

    project.manager_status = InviteStatus.DECLINED.value
    project.status = ProjectStatus.REJECTED.value
    db.flush()
    logger.info(f"Manager {user_id} rejected project {project.id}")
    return project


def delete_project(db: Session, project: Project, user_id: int):
    """
    Owner-only delete. Tasks and notifications go with the project;
    uploads and chat messages are left in place.
    """
    if project.owner_id != user_id:
        raise_forbidden(ErrorMessages.ONLY_OWNER_DELETE)

    project_id = project.id
    db.query(Notification).filter(Notification.project_id == project_id).delete(synchronize_session=False)
    db.query(Task).filter(Task.project_id == project_id).delete(synchronize_session=False)
    db.delete(project)
    db.flush()
    logger.info(f"Project {project_id} deleted by owner {user_id}")


# --- Team setup and team invites ---

def run_manager_setup(db: Session, project: Project, user_id: int, setup: ManagerSetupRequest) -> dict:
    """
    Replaces the project team with fresh pending invites and creates tasks.

    Not idempotent: every call adds a new batch of tasks and notifications.
    Unknown emails are skipped; repeated emails keep their first entry.

    Returns:
        dict: Invited users and created tasks, for follow-up mail
    """
    if project.manager_id != user_id:
        raise_forbidden(ErrorMessages.ONLY_MANAGER)

    project.deadline = setup.project_deadline

    # Old entries must be gone before the new ones hit the unique constraint
    project.team.clear()
    db.flush()

    invited = []
    seen_user_ids = set()
    for invite in setup.team_members:
        user = get_user_by_email(db, invite.email)
        if not user or user.id in seen_user_ids:
            continue
        seen_user_ids.add(user.id)

        project.team.append(ProjectMember(
            user_id=user.id,
            role=invite.role.value,
            status=InviteStatus.PENDING.value,
            position=len(project.team),
        ))
        notify_team_add(db, user.id, project.id, project.title, invite.role.value)
        invited.append((user, invite.role.value))

    created_tasks = []
    for item in setup.tasks:
        assignee = get_user_by_email(db, item.assignee_email)
        if not assignee:
            continue

        task = Task(
            title=item.title,
            description=item.description,
            project_id=project.id,
            assigned_to=assignee.id,
            deadline=item.deadline,
        )
        db.add(task)
        db.flush()
        notify_task_assigned(db, assignee.id, project.id, task.id, item.title, project.title)
        created_tasks.append(task)

    db.flush()
    logger.info(
        f"Manager setup on project {project.id}: {len(invited)} members invited, {len(created_tasks)} tasks created"
    )
    return {"invited": invited, "tasks": created_tasks}


def accept_team_invite(db: Session, project: Project, user_id: int) -> ProjectMember:
    member = find_team_entry(project, user_id)
    if not member:
        raise_invite_not_found()

    member.status = InviteStatus.ACCEPTED.value
    db.flush()
    logger.info(f"User {user_id} joined team of project {project.id}")
    return member


def reject_team_invite(db: Session, project: Project, user_id: int) -> ProjectMember:
    """
    Marks the team entry as declined. The row is kept for audit but
    no longer counts as part of the team.
    """
    member = find_team_entry(project, user_id)
    if not member:
        raise_invite_not_found()

    member.status = InviteStatus.DECLINED.value
    db.flush()
    logger.info(f"User {user_id} declined team invite of project {project.id}")
    return member

