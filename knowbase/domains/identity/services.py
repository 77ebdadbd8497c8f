from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import re
import uuid

from knowbase.core.errors import AuthError, ConflictError, ValidationError
from knowbase.core.security import create_access_token, user_id_from_token
from knowbase.db.repositories.user_repository import UserRepository
from knowbase.domains.identity.entities import User

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class IdentityService:
    """Сервис для работы с идентификацией и аутентификацией пользователей"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def register(self, email: str, password: str) -> str:
        """Регистрация нового пользователя, возвращает токен как при входе"""
        email = self._normalize_email(email)

        if not EMAIL_RE.match(email):
            raise ValidationError("Please enter a valid email address")

        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        if await self.user_repository.email_exists(email):
            logger.warning(f"Registration failed - email exists: {email}")
            raise ConflictError("Email already registered")

        user = await self.user_repository.create(User.create_user(email, password))
        logger.info(f"User registered: {user.id}")

        return self._issue_token(user)

    async def login(self, email: str, password: str) -> str:
        """Вход пользователя и создание JWT токена"""
        user = await self.user_repository.get_by_email(self._normalize_email(email))

        # Одинаковый ответ для неизвестного email и неверного пароля
        if not user or not user.authenticate(password):
            logger.warning(f"Login failed for {email}")
            raise AuthError("Invalid credentials")

        logger.info(f"User logged in: {user.id}")
        return self._issue_token(user)

    def verify(self, token: Optional[str]) -> uuid.UUID:
        """Проверка токена, возвращает UUID пользователя"""
        user_id = user_id_from_token(token)

        if user_id is None:
            raise AuthError("Not authorized to access this route")

        return user_id

    async def current_user(self, token: Optional[str]) -> User:
        """Получение текущего пользователя из JWT токена"""
        user = await self.user_repository.get_by_id(self.verify(token))

        if user is None:
            raise AuthError("User no longer exists")

        return user

    def _issue_token(self, user: User) -> str:
        return create_access_token(data={"sub": str(user.id)})

    @staticmethod
    def _normalize_email(email: str) -> str:
        return (email or "").strip().lower()
