from typing import Any, Callable, Dict, List, Optional
import logging

import httpx

from knowbase.client.config import ClientSettings
from knowbase.client.navigation import Navigator
from knowbase.client.session import ClientSession
from knowbase.core.errors import NetworkError, UnexpectedError, error_for_status

logger = logging.getLogger(__name__)


class ApiClient:
    """
    HTTP-клиент REST API.

    Перед каждым запросом добавляет ``Authorization: Bearer <token>`` из
    сессии. Любой ответ 401 очищает токен, оповещает подписчиков
    ``on_unauthorized`` и переводит клиента на ``/login``.
    Все ошибки приводятся к иерархии ``knowbase.core.errors`` с понятным
    сообщением: ответ сервера, недоступность сети или некорректный ответ.
    """

    def __init__(
        self,
        session: ClientSession,
        navigator: Optional[Navigator] = None,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        settings = settings or ClientSettings()
        self.session = session
        self.navigator = navigator
        self._unauthorized_callbacks: List[Callable[[], None]] = []
        self._client = httpx.AsyncClient(
            base_url=settings.api_url,
            headers={"Content-Type": "application/json"},
            timeout=settings.timeout,
            transport=transport,
        )

    async def request(self, method: str, url: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {}
        token = self.session.token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self._client.request(method, url, json=json, headers=headers)
        except httpx.RequestError as exc:
            logger.warning(f"{method} {url} failed without response: {exc!r}")
            raise NetworkError() from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code == 401:
            self.session.clear()
            for callback in list(self._unauthorized_callbacks):
                callback()
            if self.navigator is not None:
                self.navigator.navigate("/login")

        if response.is_error:
            message = payload.get("error") if isinstance(payload, dict) else None
            logger.info(f"{method} {url} -> {response.status_code}: {message}")
            raise error_for_status(response.status_code, message)

        if not isinstance(payload, dict):
            raise UnexpectedError()

        return payload

    def on_unauthorized(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Подписка на ответ 401; возвращает функцию отписки"""
        self._unauthorized_callbacks.append(callback)
        return lambda: self._unauthorized_callbacks.remove(callback)

    async def get(self, url: str) -> Dict[str, Any]:
        return await self.request("GET", url)

    async def post(self, url: str, json: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", url, json=json)

    async def put(self, url: str, json: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PUT", url, json=json)

    async def delete(self, url: str) -> Dict[str, Any]:
        return await self.request("DELETE", url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
