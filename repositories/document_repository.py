# backend/repositories/document_repository.py
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger("repositories.documents")

Document = Dict[str, Any]

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

# ============================================================
# 🔹 Resolución de identificadores (id numérico u ObjectId)
# ============================================================
def candidate_filters(raw_id: str) -> List[Document]:
    """
    Filtros a probar en orden: primero el campo legacy `id` entero,
    después el `_id` nativo. Un ObjectId inválido simplemente no aporta filtro.
    """
    filters = []
    try:
        number = int(raw_id)
    except (TypeError, ValueError):
        number = None
    # BSON solo codifica enteros de 64 bits; fuera de rango no hay `id` posible
    if number is not None and INT64_MIN <= number <= INT64_MAX:
        filters.append({"id": number})

    try:
        filters.append({"_id": ObjectId(raw_id)})
    except (InvalidId, TypeError):
        pass
    return filters

def resolve_id_filter(collection: Collection, raw_id: str) -> Optional[Document]:
    """Devuelve el primer filtro que encuentra un documento, o None."""
    for query in candidate_filters(raw_id):
        if collection.find_one(query, {"_id": 1}) is not None:
            return query
    return None

# ============================================================
# 🔹 Serialización
# ============================================================
def serialize_document(doc: Optional[Document]) -> Optional[Document]:
    """Convierte `_id` a str; el `id` legacy se conserva tal cual."""
    if doc is None:
        return None
    data = dict(doc)
    if "_id" in data:
        data["_id"] = str(data["_id"])
    return data

# ============================================================
# 🗂️ Repositorio genérico sobre una colección
# ============================================================
class DocumentRepository:
    def __init__(self, collection: Collection, resource: str):
        self.collection = collection
        self.resource = resource

    def list_all(self) -> List[Document]:
        return [serialize_document(doc) for doc in self.collection.find({})]

    def get(self, raw_id: str) -> Optional[Document]:
        query = resolve_id_filter(self.collection, raw_id)
        if query is None:
            logger.warning(f"⚠️ {self.resource} no encontrado: {raw_id}")
            return None
        return serialize_document(self.collection.find_one(query))

    def create(self, payload: Document) -> str:
        # insert_one agrega `_id` al dict recibido; se inserta una copia
        result = self.collection.insert_one(dict(payload))
        logger.info(f"✅ {self.resource} creado con ID {result.inserted_id}")
        return str(result.inserted_id)

    def update(self, raw_id: str, fields: Document) -> bool:
        """Merge superficial con $set. True si algún documento coincidió."""
        query = resolve_id_filter(self.collection, raw_id)
        if query is None:
            logger.warning(f"⚠️ {self.resource} no encontrado para actualizar: {raw_id}")
            return False

        changes = {k: v for k, v in fields.items() if k != "_id"}
        if not changes:
            return True

        result = self.collection.update_one(query, {"$set": changes})
        return result.matched_count > 0

    def delete(self, raw_id: str) -> bool:
        query = resolve_id_filter(self.collection, raw_id)
        if query is None:
            logger.warning(f"⚠️ {self.resource} no encontrado para eliminar: {raw_id}")
            return False

        result = self.collection.delete_one(query)
        if result.deleted_count > 0:
            logger.info(f"🗑️ {self.resource} eliminado: {raw_id}")
            return True
        return False
