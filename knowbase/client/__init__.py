from knowbase.client.api import ApiClient
from knowbase.client.auth_context import AuthController, AuthState, auth_reducer
from knowbase.client.auth_service import AuthApi
from knowbase.client.config import ClientSettings
from knowbase.client.document_context import DocumentController, DocumentState, document_reducer
from knowbase.client.document_service import DocumentApi
from knowbase.client.navigation import Navigator
from knowbase.client.session import ClientSession, FileTokenStorage, MemoryTokenStorage, TokenStorage

__all__ = [
    "ApiClient",
    "AuthController", "AuthState", "auth_reducer",
    "AuthApi",
    "ClientSettings",
    "DocumentController", "DocumentState", "document_reducer",
    "DocumentApi",
    "Navigator",
    "ClientSession", "FileTokenStorage", "MemoryTokenStorage", "TokenStorage",
]
