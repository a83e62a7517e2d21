from __future__ import annotations
from typing import Any, Callable, Optional

from ..colorizer import Colorizer
from ..core.clock import Clock, timestamp
from ..styles import Styler, styled
from ..writers import write_console
from .base import registry

class ConsoleAdapter:
    name = "console"

    def __init__(
        self,
        colorizer: Colorizer,
        styler: Styler = styled,
        clock: Optional[Clock] = None,
        writer: Callable[[str], None] = write_console,
    ):
        self.colorizer = colorizer
        self.styler = styler
        self.clock = clock
        self.writer = writer

    def prepare_message(self, level: str, message: str) -> str:
        color = self.colorizer.color_of(level)
        stamp = self.styler(timestamp(self.clock), "dim")
        return f"[{stamp}] {self.styler(level, color)}: {message}"

    def log(self, level: str, message: str) -> None:
        self.writer(self.prepare_message(level, message))

    def __repr__(self) -> str:
        return "ConsoleAdapter()"

def _build(colorizer: Colorizer, destination: Any) -> ConsoleAdapter:
    return ConsoleAdapter(colorizer)

registry.register("console", _build)
