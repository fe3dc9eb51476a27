# backend/routes/document_routes.py
from fastapi import APIRouter, Body, Depends
from typing import Any, Callable, Dict, List, Optional
import logging

from errors import NotFoundError
from models.document import MessageResponse
from repositories.document_repository import DocumentRepository

LOG = logging.getLogger("routes.documents")

# ============================================================
# 🔹 CRUD genérico para una colección (tips, users)
# ============================================================
def build_document_router(
    resource: str,
    get_repository: Callable[..., DocumentRepository],
    prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
) -> APIRouter:
    """
    Crea las cinco rutas CRUD de `resource` sobre el repositorio inyectado.
    Los cuerpos de create/update son dicts arbitrarios; no hay validación.
    `prepare` transforma el cuerpo antes de escribirlo (p. ej. hashear password).
    """
    router = APIRouter()
    prepare = prepare or (lambda fields: fields)

    @router.get("", summary=f"Listar {resource}s", response_model=List[Dict[str, Any]])
    def list_documents(repo: DocumentRepository = Depends(get_repository)):
        return repo.list_all()

    @router.get("/{doc_id}", summary=f"Obtener {resource} por id numérico u ObjectId")
    def get_document(doc_id: str, repo: DocumentRepository = Depends(get_repository)):
        doc = repo.get(doc_id)
        if doc is None:
            raise NotFoundError(resource)
        return doc

    @router.post("", status_code=201, summary=f"Crear {resource}")
    def create_document(payload: Dict[str, Any] = Body(...), repo: DocumentRepository = Depends(get_repository)):
        payload = prepare(payload)
        inserted_id = repo.create(payload)
        return {"success": True, "insertedId": inserted_id, **payload}

    @router.put("/{doc_id}", summary=f"Actualizar {resource}", response_model=MessageResponse)
    def update_document(doc_id: str, payload: Dict[str, Any] = Body(...), repo: DocumentRepository = Depends(get_repository)):
        if not repo.update(doc_id, prepare(payload)):
            raise NotFoundError(resource)
        return MessageResponse(message=f"{resource} updated successfully")

    @router.delete("/{doc_id}", summary=f"Eliminar {resource}", response_model=MessageResponse)
    def delete_document(doc_id: str, repo: DocumentRepository = Depends(get_repository)):
        if not repo.delete(doc_id):
            raise NotFoundError(resource)
        return MessageResponse(message=f"{resource} deleted successfully")

    LOG.debug(f"📜 Rutas CRUD registradas para {resource}")
    return router
