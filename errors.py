# backend/errors.py
import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger("errors")

# ============================================================
# 🔹 Taxonomía de errores -> código HTTP
# ============================================================
NOT_FOUND = "not_found"
CONFLICT = "conflict"
VALIDATION = "validation"
AUTHENTICATION = "authentication"
STORE = "store"

STATUS_BY_KIND: Dict[str, int] = {
    NOT_FOUND: 404,
    CONFLICT: 400,
    VALIDATION: 400,
    AUTHENTICATION: 401,
    STORE: 500,
}


class ApiError(Exception):
    """Error de dominio con mensaje apto para el cliente."""
    kind = STORE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ApiError):
    kind = NOT_FOUND

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")


class ConflictError(ApiError):
    kind = CONFLICT


class ValidationError(ApiError):
    kind = VALIDATION


class AuthenticationError(ApiError):
    kind = AUTHENTICATION

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


def kind_of(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.kind
    if isinstance(exc, RequestValidationError):
        return VALIDATION
    return STORE


def status_for(exc: Exception) -> int:
    """Código HTTP para cualquier excepción; lo desconocido es 500."""
    return STATUS_BY_KIND[kind_of(exc)]

# ============================================================
# 🔹 Handlers globales
# ============================================================
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=status_for(exc), content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    message = "Invalid request body"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(status_code=status_for(exc), content={"message": message})


async def store_error_handler(request: Request, exc: Exception):
    logger.error(f"❌ Error interno en {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=status_for(exc), content={"error": str(exc)})


async def catch_unhandled_errors(request: Request, call_next):
    """Todo lo que escapa a los handlers sale como 500 {error}, también en modo debug."""
    try:
        return await call_next(request)
    except Exception as exc:
        return await store_error_handler(request, exc)


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    # corre dentro de ServerErrorMiddleware, que en debug respondería con traceback
    app.middleware("http")(catch_unhandled_errors)
