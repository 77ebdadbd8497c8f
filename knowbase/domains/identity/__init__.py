from knowbase.domains.identity.entities import User
from knowbase.domains.identity.schemas import (
    UserCreate, UserLogin, UserResponse, TokenResponse, UserEnvelope
)
from knowbase.domains.identity.services import IdentityService

__all__ = [
    "User",
    "UserCreate", "UserLogin", "UserResponse", "TokenResponse", "UserEnvelope",
    "IdentityService"
]
