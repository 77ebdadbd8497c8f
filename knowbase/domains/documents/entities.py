import uuid
from datetime import datetime
from typing import Optional


class Document:
    """Сущность документа домена Documents"""

    def __init__(
        self,
        id: uuid.UUID,
        title: str,
        content: str,
        created_by: uuid.UUID,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.created_by = created_by
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or self.created_at

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Проверка является ли пользователь владельцем"""
        return self.created_by == user_id

    def apply_changes(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        """Частичное обновление: неуказанные поля не меняются"""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        self.updated_at = datetime.utcnow()

    @classmethod
    def create_document(cls, title: str, content: str, created_by: uuid.UUID) -> "Document":
        """Создание нового документа"""
        return cls(
            id=uuid.uuid4(),
            title=title,
            content=content,
            created_by=created_by
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, created_by={self.created_by})"
