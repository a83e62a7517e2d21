from __future__ import annotations
from html import escape
from typing import Any

from ..colorizer import Colorizer
from .base import FileBackedAdapter, registry

class HtmlAdapter(FileBackedAdapter):
    """One ``<p>`` fragment per record, level text in its bound color."""
    name = "html"
    valid_extensions = (".html",)

    def prepare_message(self, level: str, message: str) -> str:
        color = self.colorizer.color_of(level)
        stamp = f"<span>[{self.timestamp()}] </span>"
        lvl = f'<span style="color:{escape(color)};">{escape(level, quote=False)}</span>'
        msg = f"<span>: {escape(message, quote=False)}</span>"
        return f"<p>{stamp}{lvl}{msg}</p>\n"

def _build(colorizer: Colorizer, destination: Any) -> HtmlAdapter:
    return HtmlAdapter(destination, colorizer)

registry.register("html", _build)
