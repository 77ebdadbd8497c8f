from typing import List, Optional
import re

from knowbase.client.auth_context import AuthController
from knowbase.client.navigation import Navigator
from knowbase.core.errors import AppError
from knowbase.views.alert import Alert
from knowbase.views.base import View

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class _AuthFormView(View):
    title = ""

    def __init__(self, auth: AuthController, navigator: Navigator):
        self.auth = auth
        self.navigator = navigator
        self.submitting = False

    async def mount(self) -> None:
        self.auth.clear_error()
        self._redirect_if_authenticated()

    def _redirect_if_authenticated(self) -> None:
        if self.auth.state.is_authenticated:
            self.navigator.navigate("/dashboard")

    def alerts(self) -> List[Alert]:
        return [Alert(self.auth.state.error, on_close=self.auth.clear_error)]

    def render(self) -> str:
        lines = [self.title]
        lines.extend(alert.render() for alert in self.alerts() if alert.visible)
        if self.submitting:
            lines.append("...")
        return "\n".join(lines)


class LoginView(_AuthFormView):
    path = "/login"
    title = "Sign in to your account"

    async def submit(self, email: str, password: str) -> None:
        self.submitting = True
        # login() не пробрасывает ошибку, она уже в auth.state.error
        await self.auth.login(email, password)
        self.submitting = False
        self._redirect_if_authenticated()


class RegisterView(_AuthFormView):
    path = "/register"
    title = "Create your account"

    def __init__(self, auth: AuthController, navigator: Navigator):
        super().__init__(auth, navigator)
        self.password_error: Optional[str] = None

    def validate(self, email: str, password: str, password2: str) -> Optional[str]:
        """Проверка формы до обращения к серверу"""
        if not EMAIL_RE.match(email or ""):
            return "Please enter a valid email address"
        if len(password or "") < 6:
            return "Password must be at least 6 characters long"
        if password != password2:
            return "Passwords do not match"
        return None

    def dismiss_password_error(self) -> None:
        self.password_error = None

    async def submit(self, email: str, password: str, password2: str) -> None:
        self.auth.clear_error()
        self.password_error = None
        self.submitting = True

        self.password_error = self.validate(email, password, password2)
        if self.password_error:
            self.submitting = False
            return

        try:
            await self.auth.register(email, password)
        except AppError:
            # Сообщение уже в auth.state.error
            pass
        self.submitting = False
        self._redirect_if_authenticated()

    def alerts(self) -> List[Alert]:
        return super().alerts() + [Alert(self.password_error, on_close=self.dismiss_password_error)]
