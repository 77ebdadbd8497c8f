from typing import Optional
import logging

import httpx

from knowbase.client.api import ApiClient
from knowbase.client.auth_context import AuthController
from knowbase.client.auth_service import AuthApi
from knowbase.client.config import ClientSettings
from knowbase.client.document_context import DocumentController
from knowbase.client.document_service import DocumentApi
from knowbase.client.navigation import Navigator
from knowbase.client.session import ClientSession, FileTokenStorage
from knowbase.views.auth import LoginView, RegisterView
from knowbase.views.base import View
from knowbase.views.dashboard import DashboardView
from knowbase.views.document_form import DocumentFormView
from knowbase.views.home import HomeView
from knowbase.views.navbar import Navbar
from knowbase.views.routing import PrivateRoute, RouteDecision

logger = logging.getLogger(__name__)

PRIVATE_PREFIXES = ("/dashboard", "/documents/")


class App:
    """Клиентское приложение: контроллеры состояния, навигация и страницы"""

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        session: Optional[ClientSession] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        settings = settings or ClientSettings()
        self.session = session or ClientSession(FileTokenStorage(settings.token_file))
        self.navigator = Navigator()
        self.api = ApiClient(self.session, self.navigator, settings=settings, transport=transport)
        self.auth = AuthController(AuthApi(self.api), self.session)
        self.api.on_unauthorized(self.auth.expire)
        self.documents = DocumentController(DocumentApi(self.api))
        self.navbar = Navbar(self.auth, self.navigator)
        self.private_route = PrivateRoute(self.auth, self.navigator)
        self.view: Optional[View] = None

    async def start(self) -> None:
        """Восстановление сессии при запуске"""
        await self.auth.load_user()
        await self.open(self.navigator.location)

    def _build_view(self, path: str) -> View:
        if path == "/login":
            return LoginView(self.auth, self.navigator)
        if path == "/register":
            return RegisterView(self.auth, self.navigator)
        if path == "/dashboard":
            return DashboardView(self.documents, self.navigator)
        if path == "/documents/new":
            return DocumentFormView(self.documents, self.navigator)
        if path.startswith("/documents/"):
            return DocumentFormView(self.documents, self.navigator, path[len("/documents/"):])
        return HomeView(self.auth)

    async def open(self, path: str) -> Optional[View]:
        """Переход на страницу; закрытые страницы проверяются PrivateRoute"""
        if path.startswith(PRIVATE_PREFIXES):
            decision = self.private_route.resolve()
            if decision is RouteDecision.LOADING:
                return None
            if decision is RouteDecision.REDIRECT:
                path = self.navigator.location

        if self.view is not None:
            self.view.unmount()

        self.navigator.navigate(path)
        self.view = self._build_view(path)
        await self.view.mount()

        # Страница могла сама перейти дальше (например, вход -> dashboard)
        if self.navigator.location != path:
            return await self.open(self.navigator.location)
        return self.view

    async def refresh(self) -> Optional[View]:
        """Открыть страницу, на которую перешел навигатор"""
        if self.view is None or self.view.path != self.navigator.location:
            return await self.open(self.navigator.location)
        return self.view

    def render(self) -> str:
        body = self.view.render() if self.view is not None else "Loading..."
        return f"{self.navbar.render()}\n\n{body}"

    async def aclose(self) -> None:
        await self.api.aclose()
