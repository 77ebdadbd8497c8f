from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
import uuid

from knowbase.core.errors import NotFoundError
from knowbase.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from knowbase.domains.documents.entities import Document


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: "Document") -> "Document":
        """Создание нового документа"""
        db_document = DocumentModel(
            id=document.id,
            title=document.title,
            content=document.content,
            created_by=document.created_by,
            created_at=document.created_at,
            updated_at=document.updated_at
        )

        self.session.add(db_document)
        await self.session.commit()
        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def get_by_id(self, document_id: uuid.UUID) -> Optional["Document"]:
        """Получение документа по UUID"""
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.id == document_id)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_by_owner(self, owner_id: uuid.UUID) -> List["Document"]:
        """Получение документов владельца, новые первыми"""
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.created_by == owner_id)
            .order_by(DocumentModel.created_at.desc())
        )
        db_documents = result.scalars().all()
        return [self._to_domain(doc) for doc in db_documents]

    async def update(self, document: "Document") -> "Document":
        """Обновление документа (created_by не меняется)"""
        stmt = (
            update(DocumentModel)
            .where(DocumentModel.id == document.id)
            .values(
                title=document.title,
                content=document.content,
                updated_at=document.updated_at
            )
        )

        await self.session.execute(stmt)
        await self.session.commit()

        updated = await self.get_by_id(document.id)
        if updated is None:
            # Документ удален между проверкой владельца и обновлением
            raise NotFoundError("Document not found")
        return updated

    async def delete(self, document_id: uuid.UUID) -> bool:
        """Удаление документа"""
        stmt = delete(DocumentModel).where(DocumentModel.id == document_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from knowbase.domains.documents.entities import Document

        return Document(
            id=db_document.id,
            title=db_document.title,
            content=db_document.content,
            created_by=db_document.created_by,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
