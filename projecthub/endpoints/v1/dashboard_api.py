from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from projecthub.database.session import get_db
from projecthub.models import User
from projecthub.auth.dependencies import get_current_user, get_caller, Caller
from projecthub.utils.project_service import get_project_or_404
from projecthub.utils.dashboard_service import build_project_dashboard
from projecthub.utils.profile_service import build_profile, build_home_dashboard

router = APIRouter(tags=["Dashboards"])

@router.get("/projects/{project_id}/dashboard")
def get_project_dashboard(
    project_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller)
):
    """
    Aggregated project view: stats, members, tasks and recent chat.
    Open to anyone holding a role in the project.
    """
    project = get_project_or_404(db, project_id)
    return build_project_dashboard(db, project, caller.id)

@router.get("/profile")
def get_profile(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    return build_profile(db, user)

@router.get("/dashboard")
def get_home_dashboard(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """
    Caller home page summary across all of their projects.
    """
    return build_home_dashboard(db, user)
