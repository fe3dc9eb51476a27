from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.database import Database
from config import settings
from database.connection import connect_to_database, close_database
from errors import register_error_handlers
import logging

# =====================================================
# * Importación de Routers
# =====================================================
from auth.routes import router as auth_router
from routes.tip_routes import router as tip_router
from routes.user_routes import router as user_router

# =====================================================
# * Configuración de Logging global
# =====================================================
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger("main")

# =====================================================
# * Ciclo de vida: abrir/cerrar MongoDB
# =====================================================
def build_lifespan(database: Optional[Database]):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if database is None:
            client, app.state.db = connect_to_database()
        else:
            app.state.db = database
        logger.info("✅ Base de datos inicializada correctamente y aplicación lista.")
        try:
            yield
        finally:
            close_database(client)
    return lifespan

# =====================================================
# * Inicialización de la aplicación
# =====================================================
def create_app(database: Optional[Database] = None) -> FastAPI:
    """Con `database` inyectada no se abre ni se cierra ningún cliente."""
    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        version=settings.VERSION,
        lifespan=build_lifespan(database),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(tip_router, prefix="/api/tips", tags=["Tips"])
    app.include_router(user_router, prefix="/api/users", tags=["Users"])
    app.include_router(auth_router, prefix="/api", tags=["Auth"])

    logger.info("📜 Routers registrados:")
    logger.info(" - /api/tips -> TipRouter")
    logger.info(" - /api/users -> UserRouter")
    logger.info(" - /api/register, /api/login -> AuthRouter")

    # =====================================================
    # * Ruta raíz
    # =====================================================
    @app.get("/", summary="Ruta raíz del backend", response_class=PlainTextResponse)
    def root():
        return f"{settings.PROJECT_NAME} API is running!"

    return app

app = create_app()

logger.info(f"🌍 {settings.PROJECT_NAME} backend iniciado en modo '{settings.ENV}'.")
