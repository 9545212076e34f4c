from enum import Enum

class ProjectRole(str, Enum):
    OWNER = "OWNER"
    MANAGER = "MANAGER"
    SCRUM_MASTER = "SCRUM_MASTER"
    TEAM_MEMBER = "TEAM_MEMBER"

class TeamRole(str, Enum):
    SCRUM_MASTER = "SCRUM_MASTER"
    TEAM_MEMBER = "TEAM_MEMBER"

class InviteStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"

class ProjectStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"

class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

class NotificationType(str, Enum):
    PROJECT_INVITE = "project-invite"
    TEAM_ADD = "team-add"
    TASK_ASSIGN = "task-assign"

class ErrorCode(str, Enum):
    # Generic
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    # Auth
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Project / Domain
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    INVITE_NOT_FOUND = "INVITE_NOT_FOUND"
    NOTIFICATION_NOT_FOUND = "NOTIFICATION_NOT_FOUND"
    MANAGER_NOT_FOUND = "MANAGER_NOT_FOUND"

    # Business rules
    INVALID_TRANSITION = "INVALID_TRANSITION"
    FILE_TYPE_NOT_ALLOWED = "FILE_TYPE_NOT_ALLOWED"
