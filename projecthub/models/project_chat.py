from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from projecthub.database.base import Base

class ProjectChat(Base):
    __tablename__ = "project_chat"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, nullable=False, index=True)
    sender_id = Column(Integer, nullable=False)
    sender_name = Column(String(100), nullable=True)
    message = Column(Text, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
