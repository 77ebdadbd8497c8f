from knowbase.client.auth_context import AuthController
from knowbase.views.base import View


class HomeView(View):
    path = "/"

    def __init__(self, auth: AuthController):
        self.auth = auth

    def render(self) -> str:
        lines = [
            "Your Personal Knowledge Base Platform",
            "Store, organize, and access your important documents in one secure place.",
            "Create and manage your knowledge base with ease.",
        ]
        if self.auth.state.is_authenticated:
            lines.append("-> Go to Dashboard (/dashboard)")
        else:
            lines.append("-> Get Started (/register)")
            lines.append("-> Log in (/login)")
        return "\n".join(lines)
