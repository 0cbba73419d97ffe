from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from app.api.models.schemas import UserDocumentList, UserDocumentModel
from app.core.errors import NotFoundError
from app.dependencies import get_document_service
from app.domain.services.document_service import COLLECTIONS, DocumentService

router = APIRouter(prefix="/users/{user_id}/{collection}", tags=["documents"])


def _check_collection(collection: str) -> str:
    if collection not in COLLECTIONS:
        raise NotFoundError("Unknown collection", {"field": "collection", "reason": f"one of {', '.join(COLLECTIONS)}"})
    return collection


@router.get("", response_model=UserDocumentList)
async def list_documents(
    user_id: str,
    collection: str = Depends(_check_collection),
    svc: DocumentService = Depends(get_document_service),
):
    docs = await svc.list_documents(user_id, collection)
    return UserDocumentList(data=[doc.to_api_model() for doc in docs])


@router.post("", response_model=UserDocumentModel, status_code=status.HTTP_201_CREATED)
async def create_document(
    user_id: str,
    data: Dict[str, Any] = Body(...),
    collection: str = Depends(_check_collection),
    svc: DocumentService = Depends(get_document_service),
):
    entity = await svc.create_document(user_id, collection, data)
    return entity.to_api_model()


@router.get("/{doc_id}", response_model=UserDocumentModel)
async def get_document(
    user_id: str,
    doc_id: str,
    collection: str = Depends(_check_collection),
    svc: DocumentService = Depends(get_document_service),
):
    try:
        entity = await svc.get_document(user_id, collection, doc_id)
    except KeyError:
        raise NotFoundError("Document not found")
    return entity.to_api_model()


@router.put("/{doc_id}", response_model=UserDocumentModel)
async def merge_document(
    user_id: str,
    doc_id: str,
    data: Dict[str, Any] = Body(...),
    collection: str = Depends(_check_collection),
    svc: DocumentService = Depends(get_document_service),
):
    entity = await svc.merge_document(user_id, collection, doc_id, data)
    return entity.to_api_model()


@router.delete("/{doc_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    user_id: str,
    doc_id: str,
    collection: str = Depends(_check_collection),
    svc: DocumentService = Depends(get_document_service),
):
    try:
        await svc.delete_document(user_id, collection, doc_id)
    except KeyError:
        raise NotFoundError("Document not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
