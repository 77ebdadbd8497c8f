from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaError

from knowbase.client.api import ApiClient
from knowbase.core.errors import UnexpectedError
from knowbase.domains.documents.schemas import DocumentResponse


class DocumentApi:
    """Вызовы /documents"""

    def __init__(self, api: ApiClient):
        self.api = api

    async def get_documents(self) -> List[DocumentResponse]:
        response = await self.api.get("/documents")
        return [self._parse(item) for item in response.get("data") or []]

    async def get_document(self, document_id: str) -> DocumentResponse:
        response = await self.api.get(f"/documents/{document_id}")
        return self._parse(response.get("data"))

    async def create_document(self, title: str, content: str) -> DocumentResponse:
        response = await self.api.post("/documents", {"title": title, "content": content})
        return self._parse(response.get("data"))

    async def update_document(
        self,
        document_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None
    ) -> DocumentResponse:
        body: Dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if content is not None:
            body["content"] = content
        response = await self.api.put(f"/documents/{document_id}", body)
        return self._parse(response.get("data"))

    async def delete_document(self, document_id: str) -> None:
        await self.api.delete(f"/documents/{document_id}")

    @staticmethod
    def _parse(data: Any) -> DocumentResponse:
        try:
            return DocumentResponse.model_validate(data)
        except SchemaError as exc:
            raise UnexpectedError() from exc
