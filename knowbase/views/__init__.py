from knowbase.views.alert import Alert
from knowbase.views.app import App
from knowbase.views.auth import LoginView, RegisterView
from knowbase.views.dashboard import DashboardView
from knowbase.views.document_form import DocumentFormView
from knowbase.views.home import HomeView
from knowbase.views.navbar import Navbar
from knowbase.views.routing import PrivateRoute, RouteDecision

__all__ = [
    "Alert",
    "App",
    "LoginView", "RegisterView",
    "DashboardView",
    "DocumentFormView",
    "HomeView",
    "Navbar",
    "PrivateRoute", "RouteDecision",
]
