from knowbase.domains.documents.entities import Document
from knowbase.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse,
    DocumentEnvelope, DocumentListEnvelope, DeleteEnvelope
)
from knowbase.domains.documents.services import DocumentService

__all__ = [
    "Document",
    "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "DocumentEnvelope", "DocumentListEnvelope", "DeleteEnvelope",
    "DocumentService"
]
