from typing import List, Union
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from knowbase.core.errors import ForbiddenError, NotFoundError
from knowbase.db.repositories.document_repository import DocumentRepository
from knowbase.domains.documents.entities import Document
from knowbase.domains.documents.schemas import DocumentCreate, DocumentUpdate

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Сервис для работы с документами.

    Все операции выполняются от имени проверенного пользователя. Для
    операций над одним документом сначала проверяется существование
    (NotFoundError), затем владелец (ForbiddenError).
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)

    async def list_documents(self, owner_id: uuid.UUID) -> List[Document]:
        """Документы пользователя, новые первыми"""
        return await self.document_repository.get_by_owner(owner_id)

    async def get_document(self, owner_id: uuid.UUID, document_id: Union[uuid.UUID, str]) -> Document:
        """Получение документа с проверкой владельца"""
        return await self._get_owned(owner_id, document_id, action="access")

    async def create_document(self, owner_id: uuid.UUID, document_data: DocumentCreate) -> Document:
        """Создание нового документа; владелец задается только сервером"""
        document = Document.create_document(
            title=document_data.title,
            content=document_data.content,
            created_by=owner_id
        )

        created_document = await self.document_repository.create(document)
        logger.info(f"Document {created_document.id} created by {owner_id}")
        return created_document

    async def update_document(
        self,
        owner_id: uuid.UUID,
        document_id: Union[uuid.UUID, str],
        update_data: DocumentUpdate
    ) -> Document:
        """Обновление документа"""
        document = await self._get_owned(owner_id, document_id, action="update")

        document.apply_changes(title=update_data.title, content=update_data.content)

        updated_document = await self.document_repository.update(document)
        logger.info(f"Document {document.id} updated by {owner_id}")
        return updated_document

    async def delete_document(self, owner_id: uuid.UUID, document_id: Union[uuid.UUID, str]) -> None:
        """Удаление документа"""
        document = await self._get_owned(owner_id, document_id, action="delete")

        if not await self.document_repository.delete(document.id):
            raise NotFoundError("Document not found")

        logger.info(f"Document {document.id} deleted by {owner_id}")

    async def _get_owned(
        self,
        owner_id: uuid.UUID,
        document_id: Union[uuid.UUID, str],
        action: str
    ) -> Document:
        document = None
        parsed_id = self._parse_id(document_id)

        if parsed_id is not None:
            document = await self.document_repository.get_by_id(parsed_id)

        if not document:
            raise NotFoundError("Document not found")

        if not document.is_owned_by(owner_id):
            logger.warning(f"User {owner_id} denied {action} on document {document.id}")
            raise ForbiddenError(f"Not authorized to {action} this document")

        return document

    @staticmethod
    def _parse_id(document_id: Union[uuid.UUID, str]):
        if isinstance(document_id, uuid.UUID):
            return document_id
        try:
            return uuid.UUID(str(document_id))
        except ValueError:
            return None
