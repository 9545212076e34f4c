from projecthub.database.base import Base
from .user import User
from .project import Project, ProjectMember
from .task import Task
from .notification import Notification
from .member_upload import MemberUpload
from .project_chat import ProjectChat

