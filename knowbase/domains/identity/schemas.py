from pydantic import BaseModel, EmailStr, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
import uuid


class UserCreate(BaseModel):
    """Схема для регистрации пользователя"""
    email: EmailStr
    password: str


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    # Без EmailStr: неверный email и неверный пароль дают одинаковый ответ
    email: str
    password: str


class UserResponse(BaseModel):
    """Схема для ответа с данными пользователя"""
    id: uuid.UUID
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel
    )


class TokenResponse(BaseModel):
    """Схема для ответа с JWT токеном"""
    success: bool = True
    token: str


class UserEnvelope(BaseModel):
    """Ответ /auth/me"""
    success: bool = True
    data: UserResponse
