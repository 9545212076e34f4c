import math
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from projecthub.models import Project, Task, User
from projecthub.constants import DASHBOARD_CHAT_LIMIT
from projecthub.enums import InviteStatus, ProjectRole, TaskStatus
from projecthub.auth.permissions import require_project_role
from projecthub.utils.chat_service import get_chat_history
from projecthub.utils.task_service import get_project_tasks
from projecthub.utils.utils import chat_to_dict
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)

# Owner and manager are shown as fully on track
LEAD_PROGRESS_PERCENT = 100


def round_percent(value: float) -> int:
    """Rounds half up, so 62.5 becomes 63."""
    return int(math.floor(value + 0.5))


def percent(part: int, total: int) -> int:
    if not total:
        return 0
    return round_percent(part / total * 100)


def count_done(tasks: List[Task]) -> int:
    return sum(1 for t in tasks if t.status == TaskStatus.DONE.value)


def count_overdue(tasks: List[Task], now: datetime) -> int:
    return sum(1 for t in tasks if t.is_overdue(now))


def _lead_entry(user: User, role: ProjectRole) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": role.value,
        "progressPercent": LEAD_PROGRESS_PERCENT,
    }


def member_progress(user: User, role: str, tasks: List[Task], now: datetime) -> dict:
    """
    Progress entry for one team member, computed from the tasks assigned to them.
    """
    own_tasks = [t for t in tasks if t.assigned_to == user.id]
    done = count_done(own_tasks)
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": role,
        "totalTasks": len(own_tasks),
        "doneTasks": done,
        "overdueTasks": count_overdue(own_tasks, now),
        "progressPercent": percent(done, len(own_tasks)),
    }


def build_members(project: Project, tasks: List[Task], now: Optional[datetime] = None) -> List[dict]:
    """
    Owner, manager, then every accepted team member in team order.
    Pending and declined entries are left out.
    """
    now = now or datetime.utcnow()
    members = []
    if project.owner:
        members.append(_lead_entry(project.owner, ProjectRole.OWNER))
    if project.manager:
        members.append(_lead_entry(project.manager, ProjectRole.MANAGER))

    for entry in project.team:
        if entry.status != InviteStatus.ACCEPTED.value or not entry.user:
            continue
        members.append(member_progress(entry.user, entry.role, tasks, now))
    return members


def build_stats(tasks: List[Task], members: List[dict], now: Optional[datetime] = None) -> dict:
    now = now or datetime.utcnow()
    completed = count_done(tasks)
    avg_progress = 0
    if members:
        avg_progress = round_percent(
            sum(m.get("progressPercent") or 0 for m in members) / len(members)
        )
    return {
        "totalTasks": len(tasks),
        "completedTasks": completed,
        "overdueTasks": count_overdue(tasks, now),
        "activeMembers": len(members),
        "completionPercent": percent(completed, len(tasks)),
        "avgProgress": avg_progress,
    }


def build_project_dashboard(db: Session, project: Project, user_id: int) -> dict:
    """
    Read-only project view for anyone holding a role in the project.
    Recomputed from scratch on every call.

    Args:
        db: Database session
        project: The project to summarise
        user_id: The requesting user

    Returns:
        dict: project summary, stats, task list, members and recent chat
    """
    require_project_role(project, user_id)

    now = datetime.utcnow()
    tasks = get_project_tasks(db, project.id)
    members = build_members(project, tasks, now)
    chat = get_chat_history(db, project.id, limit=DASHBOARD_CHAT_LIMIT)

    return {
        "project": {
            "id": project.id,
            "title": project.title,
            "description": project.description,
            "status": project.status,
            "startDate": project.created_at,
            "deadline": project.deadline,
            "lastUpdated": project.updated_at,
        },
        "stats": build_stats(tasks, members, now),
        "tasks": [
            {
                "id": t.id,
                "title": t.title,
                "status": t.status,
                "deadline": t.deadline,
                "lastUpdate": t.updated_at,
                "assigneeId": t.assigned_to,
            }
            for t in tasks
        ],
        "members": members,
        "chat": [chat_to_dict(c) for c in chat],
    }


def build_member_roster(db: Session, project: Project) -> List[dict]:
    return build_members(project, get_project_tasks(db, project.id))
