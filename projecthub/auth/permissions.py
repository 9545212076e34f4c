from typing import Optional

from projecthub.models import Project
from projecthub.constants import ErrorMessages, TASK_EDITOR_ROLES
from projecthub.enums import ProjectRole, TeamRole, InviteStatus
from projecthub.exceptions import raise_forbidden
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)


def resolve_role(project: Project, user_id: int) -> Optional[ProjectRole]:
    """
    Resolves the role a user holds inside a project.

    Priority is strict: owner, then manager, then team entry.
    Invite status is not consulted, so a pending manager or member
    already resolves to their role. Declined team entries count as removed.

    Args:
        project: The project aggregate
        user_id: The user to resolve

    Returns:
        ProjectRole or None when the user is not part of the project
    """
    if project.owner_id == user_id:
        return ProjectRole.OWNER

    if project.manager_id == user_id:
        return ProjectRole.MANAGER

    for member in project.team:
        if member.user_id != user_id:
            continue
        if member.status == InviteStatus.DECLINED.value:
            return None
        return ProjectRole(member.role or TeamRole.TEAM_MEMBER.value)

    return None


def require_project_role(project: Project, user_id: int, message: str = ErrorMessages.ACCESS_DENIED) -> ProjectRole:
    """
    Returns the caller's role or raises 403 when they have none.
    """
    role = resolve_role(project, user_id)
    if role is None:
        logger.warning(f"User {user_id} denied access to project {project.id}")
        raise_forbidden(message)
    return role


def can_update_task(role: Optional[ProjectRole]) -> bool:
    return role is not None and role.value in TASK_EDITOR_ROLES


def is_owner_or_manager(project: Project, user_id: int) -> bool:
    return user_id in (project.owner_id, project.manager_id)
