"""
Настройка логирования приложения.

- init_logging(): конфигурация корневого логгера (вызывается при старте)
- request_id: contextvar с идентификатором текущего запроса
"""
import contextvars
import logging
import sys
from typing import Optional

request_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)


def set_request_id(rid: Optional[str]) -> None:
    request_id.set(rid)


def clear_request_id() -> None:
    request_id.set(None)


class RequestIDFilter(logging.Filter):
    """Добавляет request_id текущего запроса в каждую запись"""

    def filter(self, record: logging.LogRecord) -> bool:
        rid = request_id.get()
        record.request_id = rid
        record.request_id_part = f" [request_id={rid}]" if rid else ""
        return True


def init_logging(level: Optional[str] = None) -> None:
    """Инициализация корневого логгера. Повторный вызов заменяет обработчики."""
    from knowbase.core.config import settings

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    chosen_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    root.setLevel(chosen_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(chosen_level)
    handler.addFilter(RequestIDFilter())
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s%(request_id_part)s",
        "%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    # SQL-эхо только в режиме отладки
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if chosen_level <= logging.DEBUG else logging.WARNING
    )
