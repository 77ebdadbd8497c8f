from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from knowbase.core.db import get_db
from knowbase.core.errors import AuthError
from knowbase.domains.identity.entities import User
from knowbase.domains.identity.services import IdentityService

# auto_error=False: отсутствие заголовка дает 401 в общем формате ошибок
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Зависимость для получения текущего пользователя"""
    if credentials is None:
        raise AuthError("Not authorized to access this route")

    return await IdentityService(db).current_user(credentials.credentials)
