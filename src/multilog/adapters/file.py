from __future__ import annotations
from typing import Any

from ..colorizer import Colorizer
from .base import FileBackedAdapter, registry

class FileAdapter(FileBackedAdapter):
    """Plain-text records, one line each, no color codes."""
    name = "file"
    valid_extensions = (".log", ".txt")

    def prepare_message(self, level: str, message: str) -> str:
        self.colorizer.check_level(level)
        return f"[{self.timestamp()}] {level}: {message}\n"

def _build(colorizer: Colorizer, destination: Any) -> FileAdapter:
    return FileAdapter(destination, colorizer)

registry.register("file", _build)
