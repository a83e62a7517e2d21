"""Emission primitives shared by the adapters.

Console output is a plain synchronous stdout write. File output is an append
scheduled on a background worker; the caller gets a ``Future`` back and may
wait on it or drop it.
"""
from __future__ import annotations
import os
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Union

from .core.errors import WriteFault
from .core.logging import logger

_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="multilog-writer")

def write_console(text: str) -> None:
    sys.stdout.write(text + "\n")
    sys.stdout.flush()

def _append(path: str, text: str) -> None:
    try:
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        raise WriteFault(path, e.strerror or str(e)) from e

def _report_fault(future: "Future[None]") -> None:
    exc = future.exception()
    if exc is not None:
        logger.error("Append failed", error=str(exc))

def append_file(path: Union[str, os.PathLike], text: str) -> "Future[None]":
    """Append ``text`` to ``path`` without blocking.

    The returned future resolves to ``None`` or fails with :class:`WriteFault`.
    There is no retry; ordering between appends is not part of the contract.
    """
    future = _executor.submit(_append, os.fspath(path), text)
    future.add_done_callback(_report_fault)
    return future

def drain(timeout: Optional[float] = None) -> None:
    """Block until every append scheduled so far, and its fault report, has run."""
    _executor.submit(lambda: None).result(timeout=timeout)
