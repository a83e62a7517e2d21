from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .core.errors import ConfigLoadError
from .core.logging import logger

@dataclass
class LoggerConfig:
    levels: Optional[Dict[str, str]] = None    # level -> color; None means defaults
    output: Optional[Dict[str, Any]] = None    # console/file/html -> destination; None means console only

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "LoggerConfig":
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        levels = data.get("levels")
        output = data.get("output")
        return cls(
            levels=dict(levels) if levels is not None else None,
            output=dict(output) if output is not None else None,
        )

    @classmethod
    def load(cls, path) -> "LoggerConfig":
        """Read a JSON file holding ``levels`` and/or ``output`` objects."""
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigLoadError(str(path), str(e)) from e
        if not isinstance(raw, dict):
            raise ConfigLoadError(str(path), "top-level value must be an object")
        for key in ("levels", "output"):
            if raw.get(key) is not None and not isinstance(raw[key], dict):
                raise ConfigLoadError(str(path), f"'{key}' must be an object")
        levels = raw.get("levels") or {}
        if not all(isinstance(v, str) for v in levels.values()):
            raise ConfigLoadError(str(path), "'levels' values must be strings")
        output = raw.get("output") or {}
        for key in ("file", "html"):
            if key in output and not isinstance(output[key], str):
                raise ConfigLoadError(str(path), f"'output.{key}' must be a path string")
        logger.debug("Loaded logger config", path=str(path))
        return cls.from_mapping(raw)

