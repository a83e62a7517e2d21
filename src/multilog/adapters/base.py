from __future__ import annotations
import os
from concurrent.futures import Future
from typing import Any, Callable, Optional, Protocol, Tuple

from ..colorizer import Colorizer
from ..core.clock import Clock, timestamp
from ..core.errors import InvalidDestinationError
from ..writers import append_file

class OutputAdapter(Protocol):
    name: str
    def log(self, level: str, message: str) -> Optional["Future[None]"]: ...

class FileBackedAdapter:
    """Adapter that appends each prepared record to a destination file.

    Subclasses set ``valid_extensions`` and implement ``prepare_message``.
    """
    name = "file"
    valid_extensions: Tuple[str, ...] = ()

    def __init__(self, file, colorizer: Colorizer, clock: Optional[Clock] = None):
        self.colorizer = colorizer
        self.clock = clock
        self.file = self._validate(file)

    def _validate(self, file) -> str:
        try:
            path = os.fspath(file)
        except TypeError:
            raise InvalidDestinationError(file, self.valid_extensions) from None
        if not isinstance(path, str) or not path.lower().endswith(self.valid_extensions):
            raise InvalidDestinationError(file, self.valid_extensions)
        return path

    def timestamp(self) -> str:
        return timestamp(self.clock)

    def prepare_message(self, level: str, message: str) -> str:
        raise NotImplementedError

    def log(self, level: str, message: str) -> "Future[None]":
        return append_file(self.file, self.prepare_message(level, message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.file!r})"

AdapterBuilder = Callable[[Colorizer, Any], OutputAdapter]

class AdapterRegistry:
    """Maps an ``output`` config key to the builder for its adapter."""

    def __init__(self):
        self._builders: dict[str, AdapterBuilder] = {}

    def register(self, name: str, builder: AdapterBuilder):
        self._builders[name] = builder

    def get(self, name: str) -> AdapterBuilder | None:
        return self._builders.get(name)

    def names(self) -> list[str]:
        return list(self._builders)

registry = AdapterRegistry()
