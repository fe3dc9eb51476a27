# backend/models/document.py
from pydantic import BaseModel

class MessageResponse(BaseModel):
    success: bool = True
    message: str
