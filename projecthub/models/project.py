from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from projecthub.database.base import Base
from projecthub.enums import InviteStatus, ProjectStatus, TeamRole

class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)

    # Owner and manager are plain references; emails are read from the user row
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    manager_status = Column(String(20), nullable=False, default=InviteStatus.PENDING.value)

    requirement_file_path = Column(String(500), nullable=True)
    deadline = Column(DateTime, nullable=True)
    status = Column(String(20), nullable=False, default=ProjectStatus.PENDING.value)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", foreign_keys=[owner_id])
    manager = relationship("User", foreign_keys=[manager_id])

    team = relationship(
        "ProjectMember",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectMember.position",
    )

    @property
    def visible_team(self):
        """Team entries that have not declined their invite."""
        return [m for m in self.team if m.status != InviteStatus.DECLINED.value]


class ProjectMember(Base):
    """
    One team entry of a project.
    Declined invites stay in the table for audit but are treated as removed.
    """
    __tablename__ = "project_members"
    __table_args__ = (UniqueConstraint("project_id", "user_id", name="uq_project_member"),)

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(String(20), nullable=True, default=TeamRole.TEAM_MEMBER.value)
    status = Column(String(20), nullable=False, default=InviteStatus.PENDING.value)
    position = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    project = relationship("Project", back_populates="team")
    user = relationship("User", back_populates="memberships")
