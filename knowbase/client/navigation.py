from typing import Callable, List
import logging

logger = logging.getLogger(__name__)


class Navigator:
    """Текущий адрес клиента и история переходов"""

    def __init__(self, location: str = "/"):
        self.location = location
        self.history: List[str] = [location]
        self._listeners: List[Callable[[str], None]] = []

    def navigate(self, path: str) -> None:
        """Переход на новый адрес"""
        if path == self.location:
            return
        logger.debug(f"Navigate {self.location} -> {path}")
        self.location = path
        self.history.append(path)
        for listener in list(self._listeners):
            listener(path)

    def subscribe(self, listener: Callable[[str], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)
