from __future__ import annotations
import os
import sys
from datetime import datetime, timezone
from typing import Literal, Any

from colorama import Fore, Style

Level = Literal["DEBUG","INFO","WARN","ERROR"]

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}

LEVEL_ORDER = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}

class DiagnosticLogger:
    """Leveled logger for the package's own diagnostics, written to stderr."""

    def __init__(self, level: Level = "WARN"):
        self.threshold = LEVEL_ORDER[level]

    def set_level(self, level: Level):
        self.threshold = LEVEL_ORDER[level]

    def enabled(self, level: Level) -> bool:
        return LEVEL_ORDER[level] >= self.threshold

    def _emit(self, level: Level, msg: str, **extra: Any):
        if not self.enabled(level):
            return
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extrastr = (" " + " ".join(f"{k}={v}" for k,v in extra.items())) if extra else ""
        color = COLORS[level]
        sys.stderr.write(f"{color}{stamp} [multilog {level}] {msg}{extrastr}{Style.RESET_ALL}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

def _level_from_env() -> Level:
    lvl = os.environ.get("MULTILOG_LOG_LEVEL", "WARN").strip().upper()
    return lvl if lvl in LEVEL_ORDER else "WARN"  # type: ignore[return-value]

logger = DiagnosticLogger(_level_from_env())
