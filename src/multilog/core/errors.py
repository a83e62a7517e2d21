from __future__ import annotations
from typing import Iterable

class MultilogError(Exception):
    """Base for all logger errors."""

class UnknownLevelError(MultilogError):
    def __init__(self, level: str):
        super().__init__(f"No such level: {level}")
        self.level = level

class InvalidDestinationError(MultilogError):
    def __init__(self, path, accepted: Iterable[str]):
        self.accepted = tuple(accepted)
        super().__init__(f"Not valid file extension: {path} (expected {'/'.join(self.accepted)})")
        self.path = path

class WriteFault(MultilogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed appending to '{path}': {detail}")
        self.path = path
        self.detail = detail

class ConfigLoadError(MultilogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed loading '{path}': {detail}")
        self.path = path
        self.detail = detail
