"""
Иерархия ошибок приложения.

Одни и те же классы используются сервером (сервисы поднимают их, а
обработчики в ``knowbase.main`` превращают в HTTP-ответ
``{"success": false, "error": ...}``) и клиентом (``ApiClient`` восстанавливает
их из ответа сервера), поэтому представления никогда не различают
транспортные и прикладные ошибки.
"""
from typing import Optional


class AppError(Exception):
    """Базовая ошибка приложения"""

    status_code: int = 500
    default_message: str = "Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Некорректные входные данные"""

    status_code = 400
    default_message = "Invalid input"


class ConflictError(AppError):
    """Email уже зарегистрирован"""

    status_code = 400
    default_message = "Email already registered"


class AuthError(AppError):
    """Неверные учетные данные, отсутствующий или просроченный токен"""

    status_code = 401
    default_message = "Not authorized to access this route"


class ForbiddenError(AppError):
    """Ресурс принадлежит другому пользователю"""

    status_code = 403
    default_message = "Not authorized to access this document"


class NotFoundError(AppError):
    """Ресурс не найден"""

    status_code = 404
    default_message = "Resource not found"


class NetworkError(AppError):
    """Запрос не дошел до сервера"""

    status_code = 0
    default_message = "Network error. Please check your connection."


class UnexpectedError(AppError):
    """Любая другая ошибка"""

    status_code = 500
    default_message = "An unexpected error occurred."


_BY_STATUS = {
    400: ValidationError,
    401: AuthError,
    403: ForbiddenError,
    404: NotFoundError,
}


def error_for_status(status_code: int, message: Optional[str] = None) -> AppError:
    """Восстановление ошибки по HTTP статусу ответа"""
    error_class = _BY_STATUS.get(status_code, UnexpectedError)
    return error_class(message)
