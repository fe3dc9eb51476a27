# backend/auth/models.py
from pydantic import BaseModel

from models.user import UserSummary

class UserRegister(BaseModel):
    email: str
    password: str
    name: str

class UserLogin(BaseModel):
    email: str
    password: str

class RegisterResponse(BaseModel):
    success: bool = True
    message: str
    userId: str

class LoginResponse(BaseModel):
    success: bool = True
    message: str
    user: UserSummary
