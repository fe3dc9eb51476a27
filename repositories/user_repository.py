# backend/repositories/user_repository.py
from datetime import datetime, timezone
from fastapi import Depends
from pymongo.database import Database
from typing import Optional
import logging

from config import settings
from database.connection import get_database
from repositories.document_repository import Document, DocumentRepository

logger = logging.getLogger("repositories.users")

# ============================================================
# 🗂️ Repositorio de usuarios
# ============================================================
class UserRepository(DocumentRepository):
    def __init__(self, db: Database):
        super().__init__(db[settings.USERS_COLLECTION], "User")

    def find_by_email(self, email: str) -> Optional[Document]:
        """Documento crudo (con password) para uso interno de auth."""
        return self.collection.find_one({"email": email})

    def insert_user(self, email: str, password: str, name: str) -> str:
        user_doc = {
            "email": email,
            "password": password,
            "name": name,
            "createdAt": datetime.now(timezone.utc),
        }
        result = self.collection.insert_one(user_doc)
        logger.info(f"✅ Usuario registrado con ID {result.inserted_id}")
        return str(result.inserted_id)

# ------------------------------------------------------------
# 🔹 Dependencia FastAPI
# ------------------------------------------------------------
def get_user_repository(db: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(db)
