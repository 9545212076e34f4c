from datetime import datetime

from sqlalchemy.orm import Session

from projecthub.models import User
from projecthub.constants import RECENT_ACTIVITY_LIMIT, HOURS_PER_COMPLETED_TASK
from projecthub.enums import ProjectRole, ProjectStatus, TaskStatus
from projecthub.utils.notification_service import get_latest_notifications
from projecthub.utils.project_service import get_user_projects
from projecthub.utils.task_service import get_assigned_tasks
from projecthub.utils.utils import notification_to_dict


def _display_role(user_id: int, projects) -> str:
    if any(p.owner_id == user_id for p in projects):
        return "Owner"
    if any(p.manager_id == user_id for p in projects):
        return "Manager"
    return "Team Member"


def _card_role(project, user_id: int) -> str:
    if project.owner_id == user_id:
        return ProjectRole.OWNER.value
    if project.manager_id == user_id:
        return ProjectRole.MANAGER.value
    return "MEMBER"


def build_profile(db: Session, user: User) -> dict:
    """
    Caller profile: identity, task totals and the latest task activity.
    """
    projects = get_user_projects(db, user.id)
    tasks = get_assigned_tasks(db, user.id)
    completed = sum(1 for t in tasks if t.status == TaskStatus.DONE.value)

    recent_activity = [
        {
            "label": f'Task "{t.title}" marked as {t.status}',
            "time": (t.updated_at or t.created_at).date().isoformat(),
            "meta": "Task update",
        }
        for t in tasks[:RECENT_ACTIVITY_LIMIT]
    ]

    return {
        "name": user.name,
        "email": user.email,
        "phone": user.phone or "",
        "role": _display_role(user.id, projects),
        "memberSince": user.created_at.date().isoformat() if user.created_at else None,
        "tasksCompleted": completed,
        "totalTasks": len(tasks),
        "hoursLogged": completed * HOURS_PER_COMPLETED_TASK,
        "recentActivity": recent_activity,
    }


def build_home_dashboard(db: Session, user: User) -> dict:
    """
    Caller home page: summary counters, project cards and latest notifications.
    """
    now = datetime.utcnow()
    projects = get_user_projects(db, user.id)
    tasks = get_assigned_tasks(db, user.id)

    upcoming = sum(
        1 for t in tasks
        if t.deadline and t.deadline >= now and t.status != TaskStatus.DONE.value
    )

    return {
        "user": {"name": user.name, "email": user.email},
        "summary": {
            "activeProjects": sum(1 for p in projects if p.status == ProjectStatus.ACTIVE.value),
            "myTasks": len(tasks),
            "upcomingDeadlines": upcoming,
        },
        "projects": [
            {
                "id": p.id,
                "title": p.title,
                "description": p.description,
                "status": p.status,
                "role": _card_role(p, user.id),
            }
            for p in projects
        ],
        "notifications": [notification_to_dict(n) for n in get_latest_notifications(db, user.id)],
    }
