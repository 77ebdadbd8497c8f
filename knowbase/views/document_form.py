from typing import Optional

from knowbase.client.document_context import DocumentController
from knowbase.client.navigation import Navigator
from knowbase.views.alert import Alert
from knowbase.views.base import View


class DocumentFormView(View):
    """Создание документа или редактирование существующего"""

    def __init__(
        self,
        documents: DocumentController,
        navigator: Navigator,
        document_id: Optional[str] = None
    ):
        self.documents = documents
        self.navigator = navigator
        self.document_id = document_id
        self.path = f"/documents/{document_id}" if document_id else "/documents/new"
        self.title = ""
        self.content = ""

    @property
    def is_edit_mode(self) -> bool:
        return bool(self.document_id)

    async def mount(self) -> None:
        if self.is_edit_mode:
            await self.documents.fetch_document(self.document_id)
            current = self.documents.state.current_document
            if current is not None:
                self.title = current.title
                self.content = current.content

    def unmount(self) -> None:
        self.documents.clear_current_document()

    async def submit(self, title: str, content: str) -> None:
        # Повторная отправка не блокируется
        self.title, self.content = title, content
        if self.is_edit_mode:
            await self.documents.edit_document(self.document_id, title, content)
        else:
            await self.documents.add_document(title, content)
        self.navigator.navigate("/dashboard")

    def cancel(self) -> None:
        self.navigator.navigate("/dashboard")

    def render(self) -> str:
        state = self.documents.state
        if state.loading and self.is_edit_mode:
            return "Loading..."

        lines = ["Edit Document" if self.is_edit_mode else "Create New Document"]
        alert = Alert(state.error, on_close=self.documents.clear_error)
        if alert.visible:
            lines.append(alert.render())
        lines.append(f"Title: {self.title}")
        lines.append("Content:")
        lines.append(self.content)
        lines.append("[Cancel] [Update Document]" if self.is_edit_mode else "[Cancel] [Create Document]")
        return "\n".join(lines)
