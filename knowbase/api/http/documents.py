from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from knowbase.core.auth import get_current_user
from knowbase.core.db import get_db
from knowbase.domains.documents.entities import Document
from knowbase.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse,
    DocumentEnvelope, DocumentListEnvelope, DeleteEnvelope
)
from knowbase.domains.documents.services import DocumentService
from knowbase.domains.identity.entities import User

router = APIRouter(prefix="/documents", tags=["documents"])


def _to_response(document: Document) -> DocumentResponse:
    return DocumentResponse(
        id=document.id,
        title=document.title,
        content=document.content,
        created_by=document.created_by,
        created_at=document.created_at,
        updated_at=document.updated_at
    )


@router.get("", response_model=DocumentListEnvelope)
async def get_documents(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Получение документов текущего пользователя"""
    documents = await DocumentService(db).list_documents(current_user.id)

    return DocumentListEnvelope(
        count=len(documents),
        data=[_to_response(doc) for doc in documents]
    )


@router.get("/{document_id}", response_model=DocumentEnvelope)
async def get_document(
    document_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Получение документа по id"""
    document = await DocumentService(db).get_document(current_user.id, document_id)
    return DocumentEnvelope(data=_to_response(document))


@router.post("", response_model=DocumentEnvelope, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Создание нового документа"""
    document = await DocumentService(db).create_document(current_user.id, document_data)
    return DocumentEnvelope(data=_to_response(document))


@router.put("/{document_id}", response_model=DocumentEnvelope)
async def update_document(
    document_id: str,
    update_data: DocumentUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Обновление документа"""
    document = await DocumentService(db).update_document(current_user.id, document_id, update_data)
    return DocumentEnvelope(data=_to_response(document))


@router.delete("/{document_id}", response_model=DeleteEnvelope)
async def delete_document(
    document_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Удаление документа"""
    await DocumentService(db).delete_document(current_user.id, document_id)
    return DeleteEnvelope()
