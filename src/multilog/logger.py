from __future__ import annotations
from concurrent.futures import Future
from typing import Callable, Iterable, List, Tuple

from .adapters.base import OutputAdapter

class Logger:
    """Fans each record out to its adapters, in order.

    The first adapter that raises stops the fan-out; later adapters never see
    the record. File writes are scheduled, not awaited: ``log`` hands back
    their futures for callers that care.
    """

    def __init__(self, adapters: Iterable[OutputAdapter] = ()):
        self._adapters: Tuple[OutputAdapter, ...] = tuple(adapters)

    @property
    def adapters(self) -> Tuple[OutputAdapter, ...]:
        return self._adapters

    def log(self, level: str, message: str) -> List["Future[None]"]:
        pending: List["Future[None]"] = []
        for adapter in self._adapters:
            result = adapter.log(level, message)
            if result is not None:
                pending.append(result)
        return pending

    def make_deferred_log(self, level: str, message: str) -> Callable[[Callable[[], None]], None]:
        """Wrap one ``log`` call for callback-sequenced pipelines.

        The returned callable logs, then calls ``done()`` once.
        """
        def deferred(done: Callable[[], None]) -> None:
            self.log(level, message)
            done()
        return deferred

    def __repr__(self) -> str:
        return f"Logger({list(self._adapters)!r})"
