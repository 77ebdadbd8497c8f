from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from knowbase.core.auth import get_current_user
from knowbase.core.db import get_db
from knowbase.domains.identity.entities import User
from knowbase.domains.identity.schemas import (
    UserCreate, UserLogin, UserResponse, TokenResponse, UserEnvelope
)
from knowbase.domains.identity.services import IdentityService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Регистрация нового пользователя"""
    token = await IdentityService(db).register(user_data.email, user_data.password)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """Вход пользователя"""
    token = await IdentityService(db).login(login_data.email, login_data.password)
    return TokenResponse(token=token)


@router.get("/me", response_model=UserEnvelope)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Получение информации о текущем пользователе"""
    return UserEnvelope(
        data=UserResponse(
            id=current_user.id,
            email=current_user.email,
            created_at=current_user.created_at,
            updated_at=current_user.updated_at
        )
    )
