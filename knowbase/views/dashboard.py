from typing import List, Optional

from knowbase.client.document_context import DocumentController
from knowbase.client.navigation import Navigator
from knowbase.domains.documents.schemas import DocumentResponse
from knowbase.views.alert import Alert
from knowbase.views.base import View

RECENT_COUNT = 3
PREVIEW_LENGTH = 150


class DashboardView(View):
    """Список документов пользователя"""

    path = "/dashboard"

    def __init__(self, documents: DocumentController, navigator: Navigator):
        self.documents = documents
        self.navigator = navigator
        self.confirm_delete: Optional[str] = None

    async def mount(self) -> None:
        await self.documents.fetch_documents()

    @property
    def recent_documents(self) -> List[DocumentResponse]:
        return self.documents.state.documents[:RECENT_COUNT]

    async def handle_delete(self, document_id: str) -> None:
        """Первое нажатие запрашивает подтверждение, второе удаляет"""
        document_id = str(document_id)
        if self.confirm_delete == document_id:
            await self.documents.remove_document(document_id)
            self.confirm_delete = None
        else:
            self.confirm_delete = document_id

    def open_document(self, document_id: str) -> None:
        self.navigator.navigate(f"/documents/{document_id}")

    def create_document(self) -> None:
        self.navigator.navigate("/documents/new")

    @staticmethod
    def preview(document: DocumentResponse) -> str:
        return f"{document.content[:PREVIEW_LENGTH]}..."

    def render(self) -> str:
        state = self.documents.state
        if state.loading:
            return "Loading..."

        lines = [f"Total Documents: {len(state.documents)}", "Recently Added:"]
        if not self.recent_documents:
            lines.append("  No recent documents")
        for doc in self.recent_documents:
            lines.append(f"  {doc.title} ({doc.created_at:%Y-%m-%d})")

        lines.append("Your Documents")
        alert = Alert(state.error, on_close=self.documents.clear_error)
        if alert.visible:
            lines.append(alert.render())

        if not state.documents:
            lines.append("No documents yet")
            lines.append("Create your first document to get started with your knowledge base.")
            return "\n".join(lines)

        for doc in state.documents:
            action = "Confirm Delete" if self.confirm_delete == str(doc.id) else "Delete"
            lines.append(f"- {doc.title} [{action}]")
            lines.append(f"  {self.preview(doc)}")
            lines.append(f"  Created: {doc.created_at:%Y-%m-%d}")
        return "\n".join(lines)
