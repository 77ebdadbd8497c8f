from typing import List, Tuple

from knowbase.client.auth_context import AuthController
from knowbase.client.navigation import Navigator

BRAND = "Knowledge Base"


class Navbar:
    """Шапка: приветствие и выход для вошедшего, ссылки входа для гостя"""

    def __init__(self, auth: AuthController, navigator: Navigator):
        self.auth = auth
        self.navigator = navigator

    @property
    def links(self) -> List[Tuple[str, str]]:
        if self.auth.state.is_authenticated:
            return [("Logout", "/login")]
        return [("Login", "/login"), ("Register", "/register")]

    def logout(self) -> None:
        self.auth.logout()
        self.navigator.navigate("/login")

    def render(self) -> str:
        parts = [BRAND]
        user = self.auth.state.user
        if self.auth.state.is_authenticated and user is not None:
            parts.append(f"Welcome, {user.email}")
        parts.extend(label for label, _ in self.links)
        return " | ".join(parts)
