import enum

from knowbase.client.auth_context import AuthController
from knowbase.client.navigation import Navigator


class RouteDecision(enum.Enum):
    LOADING = "loading"
    ALLOW = "allow"
    REDIRECT = "redirect"


class PrivateRoute:
    """Охрана закрытых страниц"""

    def __init__(self, auth: AuthController, navigator: Navigator):
        self.auth = auth
        self.navigator = navigator

    def resolve(self) -> RouteDecision:
        state = self.auth.state
        if state.loading:
            return RouteDecision.LOADING
        if state.is_authenticated:
            return RouteDecision.ALLOW
        self.navigator.navigate("/login")
        return RouteDecision.REDIRECT
