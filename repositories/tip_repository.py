# backend/repositories/tip_repository.py
from fastapi import Depends
from pymongo.database import Database

from config import settings
from database.connection import get_database
from repositories.document_repository import DocumentRepository

# ============================================================
# 🗂️ Repositorio de tips (documentos sin esquema)
# ============================================================
class TipRepository(DocumentRepository):
    def __init__(self, db: Database):
        super().__init__(db[settings.TIPS_COLLECTION], "Tip")

def get_tip_repository(db: Database = Depends(get_database)) -> TipRepository:
    return TipRepository(db)
