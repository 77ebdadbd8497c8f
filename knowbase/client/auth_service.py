from typing import Any, Dict

from pydantic import ValidationError as SchemaError

from knowbase.client.api import ApiClient
from knowbase.core.errors import UnexpectedError
from knowbase.domains.identity.schemas import UserResponse


class AuthApi:
    """Вызовы /auth"""

    def __init__(self, api: ApiClient):
        self.api = api

    async def register_user(self, email: str, password: str) -> Dict[str, Any]:
        response = await self.api.post("/auth/register", {"email": email, "password": password})
        return self._require_token(response)

    async def login_user(self, email: str, password: str) -> Dict[str, Any]:
        response = await self.api.post("/auth/login", {"email": email, "password": password})
        return self._require_token(response)

    async def get_current_user(self) -> UserResponse:
        response = await self.api.get("/auth/me")
        if not response.get("data"):
            raise UnexpectedError("Failed to load user data")
        try:
            return UserResponse.model_validate(response["data"])
        except SchemaError as exc:
            raise UnexpectedError("Failed to load user data") from exc

    @staticmethod
    def _require_token(response: Dict[str, Any]) -> Dict[str, Any]:
        if not response.get("token"):
            raise UnexpectedError("Invalid response from server")
        return response
