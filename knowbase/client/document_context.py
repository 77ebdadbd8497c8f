from dataclasses import dataclass, field, replace
from typing import Callable, ClassVar, List, Optional, Union, assert_never
import logging

from knowbase.client.document_service import DocumentApi
from knowbase.domains.documents.schemas import DocumentResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentState:
    # Новые документы первыми, как их отдает сервер
    documents: List[DocumentResponse] = field(default_factory=list)
    current_document: Optional[DocumentResponse] = None
    loading: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class GetDocuments:
    type: ClassVar[str] = "GET_DOCUMENTS"
    documents: List[DocumentResponse]


@dataclass(frozen=True)
class GetDocument:
    type: ClassVar[str] = "GET_DOCUMENT"
    document: DocumentResponse


@dataclass(frozen=True)
class AddDocument:
    type: ClassVar[str] = "ADD_DOCUMENT"
    document: DocumentResponse


@dataclass(frozen=True)
class UpdateDocument:
    type: ClassVar[str] = "UPDATE_DOCUMENT"
    document: DocumentResponse


@dataclass(frozen=True)
class DeleteDocument:
    type: ClassVar[str] = "DELETE_DOCUMENT"
    document_id: str


@dataclass(frozen=True)
class DocumentError:
    type: ClassVar[str] = "DOCUMENT_ERROR"
    error: str


@dataclass(frozen=True)
class ClearCurrent:
    type: ClassVar[str] = "CLEAR_CURRENT"


@dataclass(frozen=True)
class ClearDocumentError:
    type: ClassVar[str] = "CLEAR_ERROR"


@dataclass(frozen=True)
class SetLoading:
    type: ClassVar[str] = "SET_LOADING"


DocumentAction = Union[
    GetDocuments, GetDocument, AddDocument, UpdateDocument, DeleteDocument,
    DocumentError, ClearCurrent, ClearDocumentError, SetLoading,
]


def document_reducer(state: DocumentState, action: DocumentAction) -> DocumentState:
    match action:
        case GetDocuments(documents=documents):
            return replace(state, documents=list(documents), loading=False)
        case GetDocument(document=document):
            return replace(state, current_document=document, loading=False)
        case AddDocument(document=document):
            return replace(state, documents=[document, *state.documents], loading=False)
        case UpdateDocument(document=document):
            return replace(
                state,
                documents=[document if doc.id == document.id else doc for doc in state.documents],
                current_document=document,
                loading=False,
            )
        case DeleteDocument(document_id=document_id):
            return replace(
                state,
                documents=[doc for doc in state.documents if str(doc.id) != str(document_id)],
                loading=False,
            )
        case DocumentError(error=error):
            return replace(state, error=error, loading=False)
        case ClearCurrent():
            return replace(state, current_document=None)
        case ClearDocumentError():
            return replace(state, error=None)
        case SetLoading():
            return replace(state, loading=True)
        case _:
            assert_never(action)


class DocumentController:
    """Коллекция документов пользователя и операции над ней"""

    def __init__(self, document_api: DocumentApi):
        self.document_api = document_api
        self.state = DocumentState()
        self._listeners: List[Callable[[DocumentState], None]] = []

    def dispatch(self, action: DocumentAction) -> DocumentState:
        self.state = document_reducer(self.state, action)
        logger.debug(f"{action.type} -> {len(self.state.documents)} documents")
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def subscribe(self, listener: Callable[[DocumentState], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _fail(self, exc: Exception, fallback: str) -> None:
        self.dispatch(DocumentError(error=str(exc) or fallback))

    async def fetch_documents(self) -> None:
        try:
            self.dispatch(SetLoading())
            documents = await self.document_api.get_documents()
            self.dispatch(GetDocuments(documents=documents))
        except Exception as exc:
            self._fail(exc, "Error fetching documents")

    async def fetch_document(self, document_id: str) -> None:
        try:
            self.dispatch(SetLoading())
            document = await self.document_api.get_document(document_id)
            self.dispatch(GetDocument(document=document))
        except Exception as exc:
            self._fail(exc, "Error fetching document")

    async def add_document(self, title: str, content: str) -> None:
        try:
            self.dispatch(SetLoading())
            document = await self.document_api.create_document(title, content)
            self.dispatch(AddDocument(document=document))
        except Exception as exc:
            self._fail(exc, "Error adding document")

    async def edit_document(self, document_id: str, title: str, content: str) -> None:
        try:
            self.dispatch(SetLoading())
            document = await self.document_api.update_document(document_id, title=title, content=content)
            self.dispatch(UpdateDocument(document=document))
        except Exception as exc:
            self._fail(exc, "Error updating document")

    async def remove_document(self, document_id: str) -> None:
        try:
            self.dispatch(SetLoading())
            await self.document_api.delete_document(document_id)
            self.dispatch(DeleteDocument(document_id=str(document_id)))
        except Exception as exc:
            self._fail(exc, "Error deleting document")

    def clear_current_document(self) -> None:
        self.dispatch(ClearCurrent())

    def clear_error(self) -> None:
        self.dispatch(ClearDocumentError())
