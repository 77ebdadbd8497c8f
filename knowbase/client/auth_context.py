"""
Состояние аутентификации на клиенте.

``auth_reducer``: чистая функция (state, action) -> state. Побочные эффекты
(сохранение и удаление токена) выполняет ``AuthController.dispatch`` через
переданную ``ClientSession``.

Вход двухфазный: LOGIN_SUCCESS/REGISTER_SUCCESS сохраняют токен, но оставляют
``is_authenticated=False`` и ``loading=True``; пользователь считается вошедшим
только после USER_LOADED, то есть после успешного запроса профиля.
"""
from dataclasses import dataclass, replace
from typing import Callable, ClassVar, List, Optional, Union, assert_never
import logging

from knowbase.client.auth_service import AuthApi
from knowbase.client.session import ClientSession
from knowbase.domains.identity.schemas import UserResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthState:
    user: Optional[UserResponse] = None
    token: Optional[str] = None
    is_authenticated: bool = False
    loading: bool = True
    error: Optional[str] = None


@dataclass(frozen=True)
class UserLoaded:
    type: ClassVar[str] = "USER_LOADED"
    user: UserResponse


@dataclass(frozen=True)
class LoginSuccess:
    type: ClassVar[str] = "LOGIN_SUCCESS"
    token: str


@dataclass(frozen=True)
class RegisterSuccess:
    type: ClassVar[str] = "REGISTER_SUCCESS"
    token: str


@dataclass(frozen=True)
class AuthFailed:
    """Тихий сброс: нет токена или профиль не загрузился"""
    type: ClassVar[str] = "AUTH_ERROR"


@dataclass(frozen=True)
class LoginFail:
    type: ClassVar[str] = "LOGIN_FAIL"
    error: str


@dataclass(frozen=True)
class RegisterFail:
    type: ClassVar[str] = "REGISTER_FAIL"
    error: str


@dataclass(frozen=True)
class Logout:
    type: ClassVar[str] = "LOGOUT"


@dataclass(frozen=True)
class ClearAuthError:
    type: ClassVar[str] = "CLEAR_ERROR"


AuthAction = Union[
    UserLoaded, LoginSuccess, RegisterSuccess, AuthFailed,
    LoginFail, RegisterFail, Logout, ClearAuthError,
]


def auth_reducer(state: AuthState, action: AuthAction) -> AuthState:
    match action:
        case UserLoaded(user=user):
            return replace(state, is_authenticated=True, loading=False, user=user)
        case LoginSuccess(token=token) | RegisterSuccess(token=token):
            return replace(
                state, token=token, is_authenticated=False, loading=True, error=None, user=None
            )
        case AuthFailed():
            return replace(
                state, token=None, is_authenticated=False, loading=False, user=None, error=None
            )
        case LoginFail(error=error) | RegisterFail(error=error):
            return replace(
                state, token=None, is_authenticated=False, loading=False, user=None, error=error
            )
        case Logout():
            return replace(
                state, token=None, is_authenticated=False, loading=False, user=None, error=None
            )
        case ClearAuthError():
            return replace(state, error=None)
        case _:
            assert_never(action)


class AuthController:
    """Редьюсер аутентификации вместе с эффектами входа, регистрации и выхода"""

    def __init__(self, auth_api: AuthApi, session: ClientSession):
        self.auth_api = auth_api
        self.session = session
        self.state = AuthState(token=session.token)
        self._listeners: List[Callable[[AuthState], None]] = []

    def dispatch(self, action: AuthAction) -> AuthState:
        self.state = auth_reducer(self.state, action)

        match action:
            case LoginSuccess(token=token) | RegisterSuccess(token=token):
                self.session.save(token)
            case AuthFailed() | LoginFail() | RegisterFail() | Logout():
                self.session.clear()

        logger.debug(f"{action.type} -> authenticated={self.state.is_authenticated}")
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def subscribe(self, listener: Callable[[AuthState], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def load_user(self) -> None:
        """Загрузка профиля при старте, если токен уже сохранен"""
        if not self.session.token:
            self.dispatch(AuthFailed())
            return

        try:
            user = await self.auth_api.get_current_user()
        except Exception as exc:
            # Ошибка не показывается пользователю
            logger.info(f"Stored session rejected: {exc}")
            self.dispatch(AuthFailed())
            return

        self.dispatch(UserLoaded(user=user))

    async def login(self, email: str, password: str) -> None:
        """Вход; ошибка попадает в состояние и дальше не пробрасывается"""
        try:
            self.dispatch(ClearAuthError())
            response = await self.auth_api.login_user(email, password)
            self.dispatch(LoginSuccess(token=response["token"]))
            user = await self.auth_api.get_current_user()
            self.dispatch(UserLoaded(user=user))
        except Exception as exc:
            self.dispatch(LoginFail(error=str(exc) or "Login failed"))

    async def register(self, email: str, password: str) -> None:
        """Регистрация; после REGISTER_FAIL ошибка пробрасывается вызывающему"""
        try:
            self.dispatch(ClearAuthError())
            response = await self.auth_api.register_user(email, password)
            self.dispatch(RegisterSuccess(token=response["token"]))
            user = await self.auth_api.get_current_user()
            self.dispatch(UserLoaded(user=user))
        except Exception as exc:
            self.dispatch(RegisterFail(error=str(exc) or "Registration failed. Please try again."))
            raise

    def expire(self) -> None:
        """Сервер отклонил токен (401): сброс без сообщения об ошибке"""
        self.dispatch(AuthFailed())

    def logout(self) -> None:
        self.dispatch(Logout())

    def clear_error(self) -> None:
        self.dispatch(ClearAuthError())
