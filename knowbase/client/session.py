"""
Хранение токена на клиенте.

Токен не читается из глобального состояния: ``ClientSession`` передается в
``ApiClient`` и ``AuthController`` явно и работает через абстрактное
хранилище ``TokenStorage``.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
import json
import logging
import os

logger = logging.getLogger(__name__)


class TokenStorage(ABC):
    """Хранилище токена"""

    @abstractmethod
    def get(self) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, token: str) -> None:
        ...

    @abstractmethod
    def remove(self) -> None:
        ...


class MemoryTokenStorage(TokenStorage):
    """Хранилище в памяти процесса"""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def remove(self) -> None:
        self._token = None


class FileTokenStorage(TokenStorage):
    """Долговременное хранилище: JSON-файл в домашнем каталоге"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning(f"Unreadable session file {self.path}, ignoring it")
            return None
        token = data.get("token") if isinstance(data, dict) else None
        return token or None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Токен доступен только владельцу файла
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump({"token": token}, f)
        os.chmod(self.path, 0o600)

    def remove(self) -> None:
        self.path.unlink(missing_ok=True)


class ClientSession:
    """Сессия клиента: токен читается и записывается через хранилище"""

    def __init__(self, storage: Optional[TokenStorage] = None):
        self.storage = storage or MemoryTokenStorage()

    @property
    def token(self) -> Optional[str]:
        return self.storage.get()

    def save(self, token: str) -> None:
        self.storage.set(token)

    def clear(self) -> None:
        self.storage.remove()

    def __repr__(self) -> str:
        return f"ClientSession(authenticated={self.token is not None})"
