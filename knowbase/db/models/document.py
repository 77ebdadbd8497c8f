from sqlalchemy import Column, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from knowbase.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    created_by = Column(Uuid, ForeignKey("users.id"), index=True, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="documents")
