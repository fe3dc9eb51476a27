# backend/auth/controllers.py
from pymongo.errors import DuplicateKeyError
import logging

from errors import AuthenticationError, ConflictError
from models.user import UserSummary
from repositories.user_repository import UserRepository
from .models import UserRegister, UserLogin, RegisterResponse, LoginResponse
from .utils import hash_password, verify_password

logger = logging.getLogger("auth.controllers")

# =====================================================
# 🔹 Registrar usuario
# =====================================================
def register_user(data: UserRegister, users: UserRepository) -> RegisterResponse:
    # chequeo y alta no son atómicos: dos registros simultáneos pueden pasar
    if users.find_by_email(data.email):
        logger.warning(f"⚠️ Registro duplicado: {data.email}")
        raise ConflictError("User already exists with this email")

    try:
        user_id = users.insert_user(data.email, hash_password(data.password), data.name)
    except DuplicateKeyError:
        logger.warning(f"⚠️ Índice único rechazó el email: {data.email}")
        raise ConflictError("User already exists with this email")

    return RegisterResponse(message="User registered successfully", userId=user_id)

# =====================================================
# 🔹 Login con password
# =====================================================
def login_with_password(data: UserLogin, users: UserRepository) -> LoginResponse:
    user = users.find_by_email(data.email)
    if not user or not verify_password(data.password, user.get("password")):
        logger.warning(f"⚠️ Login fallido para {data.email}")
        raise AuthenticationError()

    logger.info(f"🔐 Login exitoso: {data.email}")
    return LoginResponse(message="Login successful", user=UserSummary.from_document(user))
