from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .core.errors import UnknownLevelError

DEFAULT_LEVELS: Mapping[str, str] = MappingProxyType({
    "info": "green",
    "warning": "yellow",
    "error": "red",
    "yolo": "magenta",
})

class Colorizer:
    """Read-only level -> color table shared by every adapter of one logger.

    A supplied mapping replaces the defaults entirely; ``{"custom": "cyan"}``
    leaves ``info`` undefined.
    """

    def __init__(self, levels: Optional[Mapping[str, str]] = None):
        source = DEFAULT_LEVELS if levels is None else levels
        self._levels: Mapping[str, str] = MappingProxyType(dict(source))

    @property
    def levels(self) -> Mapping[str, str]:
        return self._levels

    def has_level(self, level: str) -> bool:
        # a level bound to an empty color counts as undefined
        return bool(self._levels.get(level))

    def check_level(self, level: str) -> None:
        if not self.has_level(level):
            raise UnknownLevelError(level)

    def color_of(self, level: str) -> str:
        self.check_level(level)
        return self._levels[level]

    def __repr__(self) -> str:
        return f"Colorizer({dict(self._levels)!r})"
