# backend/auth/utils.py
import bcrypt
from config import settings
from errors import ValidationError

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_MAX_BYTES = 72

# =====================================================
# 🔹 Passwords
# =====================================================
def hash_password(password: str) -> str:
    """Con PASSWORD_HASHING desactivado se guarda tal cual se recibió."""
    if not settings.PASSWORD_HASHING:
        return password
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode()

def hash_password_field(fields: dict) -> dict:
    """Copia de `fields` con `password` hasheado si viene como texto."""
    password = fields.get("password")
    if not isinstance(password, str):
        return fields
    return {**fields, "password": hash_password(password)}

def is_bcrypt_hash(value) -> bool:
    return isinstance(value, str) and value.startswith(BCRYPT_PREFIXES)

def verify_password(password: str, stored) -> bool:
    # documentos legacy en texto plano siguen comparándose byte a byte
    if settings.PASSWORD_HASHING and is_bcrypt_hash(stored):
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        return bcrypt.checkpw(encoded, stored.encode("utf-8"))
    return stored == password
