from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
import uuid
from datetime import datetime


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    title: str = Field(..., max_length=255)
    content: str = Field(..., max_length=1000000)  # 1MB max content

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Please add a title')
        return v.strip()


class DocumentUpdate(BaseModel):
    """Схема для обновления документа"""
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = Field(None, max_length=1000000)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Please add a title')
        return v.strip() if v else v


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: uuid.UUID
    title: str
    content: str
    created_by: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel
    )


class DocumentEnvelope(BaseModel):
    """Ответ с одним документом"""
    success: bool = True
    data: DocumentResponse


class DocumentListEnvelope(BaseModel):
    """Ответ со списком документов"""
    success: bool = True
    count: int
    data: List[DocumentResponse]


class DeleteEnvelope(BaseModel):
    """Ответ на удаление документа"""
    success: bool = True
    data: Dict[str, Any] = Field(default_factory=dict)
