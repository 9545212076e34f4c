from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from projecthub.database.base import Base

class MemberUpload(Base):
    """
    Sprint artifact uploaded by a member.
    Keeps a plain project id so rows outlive a deleted project.
    """
    __tablename__ = "member_uploads"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, nullable=False, index=True)
    member_id = Column(Integer, nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    sprint_label = Column(String(100), nullable=True)
    note = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
