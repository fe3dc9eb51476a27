# backend/auth/routes.py
from fastapi import APIRouter, Depends

from repositories.user_repository import UserRepository, get_user_repository
from .models import UserRegister, UserLogin, RegisterResponse, LoginResponse
from .controllers import register_user, login_with_password

router = APIRouter()

# ------------------------------------------------------------
# 🔹 Registro
# ------------------------------------------------------------
@router.post("/register", status_code=201, response_model=RegisterResponse)
def register(data: UserRegister, users: UserRepository = Depends(get_user_repository)):
    return register_user(data, users)

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.post("/login", response_model=LoginResponse)
def login(data: UserLogin, users: UserRepository = Depends(get_user_repository)):
    return login_with_password(data, users)
