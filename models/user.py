# backend/models/user.py
from pydantic import BaseModel
from typing import Any, Dict, Optional

class UserSummary(BaseModel):
    """Vista reducida del usuario: nunca incluye password."""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "UserSummary":
        return cls(id=str(doc["_id"]), name=doc.get("name"), email=doc.get("email"))
