from knowbase.db.models.user import User
from knowbase.db.models.document import Document

__all__ = [
    "User",
    "Document",
]
