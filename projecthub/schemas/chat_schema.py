from typing import Optional
from pydantic import BaseModel

class ChatMessageCreate(BaseModel):
    message: Optional[str] = None
