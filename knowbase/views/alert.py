from typing import Callable, Optional

PREFIXES = {
    "success": "[ok]",
    "error": "[!]",
    "info": "[i]",
}


class Alert:
    """Баннер с сообщением; при наличии on_close его можно закрыть"""

    def __init__(
        self,
        message: Optional[str],
        kind: str = "error",
        on_close: Optional[Callable[[], None]] = None
    ):
        self.message = message
        self.kind = kind if kind in PREFIXES else "info"
        self.on_close = on_close

    @property
    def visible(self) -> bool:
        return bool(self.message)

    def close(self) -> None:
        if self.on_close is not None:
            self.on_close()

    def render(self) -> str:
        if not self.message:
            return ""
        text = f"{PREFIXES[self.kind]} {self.message}"
        if self.on_close is not None:
            text += " [x]"
        return text
