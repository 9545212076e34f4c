from pydantic import BaseModel

class UserSearchResult(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True

class NotificationCount(BaseModel):
    unread_count: int
