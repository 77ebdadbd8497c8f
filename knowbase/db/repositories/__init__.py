from knowbase.db.repositories.user_repository import UserRepository
from knowbase.db.repositories.document_repository import DocumentRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
]
