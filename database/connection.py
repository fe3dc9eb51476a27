# backend/database/connection.py
import logging
from typing import Optional, Tuple

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi

from config import settings

logger = logging.getLogger("database.connection")

# ============================================================
# 🔧 CLIENTE MONGO
# ============================================================
def build_mongo_client(uri: Optional[str] = None) -> MongoClient:
    """Crea el cliente con la Stable API v1 (strict + deprecationErrors)."""
    return MongoClient(
        uri or settings.MONGODB_URI,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )

# ============================================================
# 🌱 CONEXIÓN A LA BASE greenGarden
# ============================================================
def connect_to_database(uri: Optional[str] = None, db_name: Optional[str] = None) -> Tuple[MongoClient, Database]:
    """Abre el cliente, verifica con ping y devuelve (cliente, base)."""
    client = build_mongo_client(uri)
    try:
        client.admin.command("ping")
    except Exception:
        logger.exception("❌ Error conectando a MongoDB")
        client.close()
        raise

    name = db_name or settings.MONGO_DB
    logger.info(f"✅ Conectado a MongoDB, base: {name}")
    return client, client[name]

def close_database(client: Optional[MongoClient]):
    if client is None:
        return
    client.close()
    logger.info("🔌 Conexión MongoDB cerrada")

# ============================================================
# 🧩 DEPENDENCIA FASTAPI
# ============================================================
def get_database(request: Request) -> Database:
    """Entrega la base abierta por el lifespan de la app (app.state.db)."""
    return request.app.state.db
