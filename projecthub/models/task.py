from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from projecthub.database.base import Base
from projecthub.enums import TaskStatus

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    assigned_to = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    deadline = Column(DateTime, nullable=True)
    status = Column(String(20), nullable=False, default=TaskStatus.TODO.value)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def is_overdue(self, now: datetime) -> bool:
        return (
            self.deadline is not None
            and self.deadline < now
            and self.status != TaskStatus.DONE.value
        )
