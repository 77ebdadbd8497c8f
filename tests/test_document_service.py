"""
Тесты сервиса документов: владелец, порядок и частичное обновление
"""
import uuid

import pytest
from pydantic import ValidationError as SchemaError

from knowbase.core.errors import ForbiddenError, NotFoundError
from knowbase.db.repositories.document_repository import DocumentRepository
from knowbase.domains.documents.entities import Document
from knowbase.domains.documents.schemas import DocumentCreate, DocumentUpdate
from knowbase.domains.documents.services import DocumentService
from knowbase.domains.identity.services import IdentityService


@pytest.fixture
async def owner_id(db_session):
    service = IdentityService(db_session)
    token = await service.register("a@x.com", "secret1")
    return service.verify(token)


@pytest.fixture
async def stranger_id(db_session):
    service = IdentityService(db_session)
    token = await service.register("b@x.com", "secret1")
    return service.verify(token)


@pytest.fixture
def service(db_session):
    return DocumentService(db_session)


class TestCreateAndList:
    """Создание и список документов"""

    async def test_created_document_belongs_to_caller(self, service, owner_id):
        document = await service.create_document(owner_id, DocumentCreate(title="Notes", content="Body"))

        assert document.created_by == owner_id
        assert document.title == "Notes"
        assert document.created_at == document.updated_at

    async def test_list_is_newest_first(self, service, owner_id):
        await service.create_document(owner_id, DocumentCreate(title="First", content="1"))
        await service.create_document(owner_id, DocumentCreate(title="Second", content="2"))

        documents = await service.list_documents(owner_id)
        assert [doc.title for doc in documents] == ["Second", "First"]

    async def test_list_contains_only_own_documents(self, service, owner_id, stranger_id):
        await service.create_document(owner_id, DocumentCreate(title="Mine", content=""))
        await service.create_document(stranger_id, DocumentCreate(title="Theirs", content=""))

        documents = await service.list_documents(owner_id)
        assert [doc.title for doc in documents] == ["Mine"]

    async def test_empty_list(self, service, owner_id):
        assert await service.list_documents(owner_id) == []


class TestOwnership:
    """Доступ к чужим и несуществующим документам"""

    async def test_get_foreign_document_forbidden(self, service, owner_id, stranger_id):
        document = await service.create_document(owner_id, DocumentCreate(title="Secret", content="x"))

        with pytest.raises(ForbiddenError) as exc_info:
            await service.get_document(stranger_id, document.id)
        assert exc_info.value.status_code == 403

    async def test_update_foreign_document_forbidden(self, service, owner_id, stranger_id):
        document = await service.create_document(owner_id, DocumentCreate(title="Secret", content="x"))

        with pytest.raises(ForbiddenError):
            await service.update_document(stranger_id, document.id, DocumentUpdate(title="Hacked"))

        unchanged = await service.get_document(owner_id, document.id)
        assert unchanged.title == "Secret"

    async def test_delete_foreign_document_forbidden(self, service, owner_id, stranger_id):
        document = await service.create_document(owner_id, DocumentCreate(title="Secret", content="x"))

        with pytest.raises(ForbiddenError):
            await service.delete_document(stranger_id, document.id)
        assert await service.get_document(owner_id, document.id)

    async def test_missing_document(self, service, owner_id):
        with pytest.raises(NotFoundError):
            await service.get_document(owner_id, uuid.uuid4())

    async def test_update_missing_document(self, service, owner_id):
        with pytest.raises(NotFoundError):
            await service.update_document(owner_id, uuid.uuid4(), DocumentUpdate(title="New"))

    async def test_delete_missing_document(self, service, owner_id):
        with pytest.raises(NotFoundError):
            await service.delete_document(owner_id, uuid.uuid4())

    async def test_malformed_id_is_not_found(self, service, owner_id):
        with pytest.raises(NotFoundError):
            await service.get_document(owner_id, "not-a-uuid")


class TestUpdateAndDelete:
    """Обновление и удаление"""

    async def test_partial_update_keeps_other_fields(self, service, owner_id):
        document = await service.create_document(owner_id, DocumentCreate(title="Old", content="Body"))

        updated = await service.update_document(owner_id, str(document.id), DocumentUpdate(title="New"))

        assert updated.title == "New"
        assert updated.content == "Body"
        assert updated.created_by == owner_id
        assert updated.created_at == document.created_at
        assert updated.updated_at > document.updated_at

    async def test_delete_twice(self, service, owner_id):
        document = await service.create_document(owner_id, DocumentCreate(title="Temp", content=""))

        await service.delete_document(owner_id, document.id)

        with pytest.raises(NotFoundError):
            await service.delete_document(owner_id, document.id)
        assert await service.list_documents(owner_id) == []


class TestDocumentSchemas:
    """Валидация входных данных"""

    def test_title_required(self):
        with pytest.raises(SchemaError):
            DocumentCreate(content="Body")

    def test_blank_title_rejected(self):
        with pytest.raises(SchemaError, match="Please add a title"):
            DocumentCreate(title="   ", content="Body")

    def test_title_is_stripped(self):
        assert DocumentCreate(title="  Notes ", content="").title == "Notes"

    def test_update_fields_optional(self):
        update = DocumentUpdate(content="Only content")
        assert update.title is None


class TestDocumentRepository:
    """Репозиторий документов"""

    async def test_update_of_vanished_row(self, db_session, owner_id):
        repository = DocumentRepository(db_session)
        document = await repository.create(Document.create_document("Temp", "", owner_id))
        await repository.delete(document.id)

        document.apply_changes(title="Late edit")
        with pytest.raises(NotFoundError, match="Document not found"):
            await repository.update(document)
