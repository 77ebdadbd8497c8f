class View:
    """Базовое представление: жизненный цикл и текстовый рендер"""

    path: str = "/"

    async def mount(self) -> None:
        pass

    def unmount(self) -> None:
        pass

    def render(self) -> str:
        raise NotImplementedError
