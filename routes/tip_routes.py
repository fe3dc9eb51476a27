# backend/routes/tip_routes.py
from repositories.tip_repository import get_tip_repository
from routes.document_routes import build_document_router

router = build_document_router("Tip", get_tip_repository)
