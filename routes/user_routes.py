# backend/routes/user_routes.py
from auth.utils import hash_password_field
from repositories.user_repository import get_user_repository
from routes.document_routes import build_document_router

# registro/login viven en auth.routes; aquí solo el CRUD genérico
router = build_document_router("User", get_user_repository, prepare=hash_password_field)
