from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from projecthub.enums import TeamRole


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Deadlines are stored naive in UTC; offsets are folded in first."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class TeamMemberInvite(BaseModel):
    email: str
    role: TeamRole = TeamRole.TEAM_MEMBER


class TaskAssignment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: Optional[str] = None
    assignee_email: str = Field(alias="assigneeEmail")
    deadline: Optional[datetime] = None

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value):
        return to_naive_utc(value)


class ManagerSetupRequest(BaseModel):
    """
    Payload of the manager setup step.
    Replaces the whole team and adds a new batch of tasks.
    """
    model_config = ConfigDict(populate_by_name=True)

    team_members: List[TeamMemberInvite] = Field(default_factory=list, alias="teamMembers")
    tasks: List[TaskAssignment] = Field(default_factory=list)
    project_deadline: Optional[datetime] = Field(default=None, alias="projectDeadline")

    @field_validator("project_deadline")
    @classmethod
    def project_deadline_in_utc(cls, value):
        return to_naive_utc(value)
