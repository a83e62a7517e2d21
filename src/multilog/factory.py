from __future__ import annotations
from typing import Any, Mapping, Optional, Union

from .adapters import registry
from .adapters.console import ConsoleAdapter
from .colorizer import Colorizer
from .config import LoggerConfig
from .core.logging import logger
from .logger import Logger

ConfigLike = Union[LoggerConfig, Mapping[str, Any], None]

def create_logger(config: ConfigLike = None) -> Logger:
    """Build a :class:`Logger` from a configuration.

    ``levels`` maps level names to colors (defaults: info, warning, error,
    yolo). ``output`` maps ``console``/``file``/``html`` to destinations, in
    the order the adapters should run; unknown keys are ignored. Without
    ``output`` the logger only writes to the console.

    Raises :class:`InvalidDestinationError` if a file or html destination has
    the wrong extension; no logger is returned in that case.
    """
    cfg = LoggerConfig.from_mapping(config)
    colorizer = Colorizer(cfg.levels)

    if cfg.output is None:
        adapters = [ConsoleAdapter(colorizer)]
    else:
        adapters = []
        for name, destination in cfg.output.items():
            build = registry.get(name)
            if build is None:
                logger.debug("Ignoring unknown output", output=name, known=",".join(registry.names()))
                continue
            adapters.append(build(colorizer, destination))

    logger.debug("Logger assembled", adapters=",".join(a.name for a in adapters),
                 levels=",".join(colorizer.levels))
    return Logger(adapters)

class LoggerFactory:
    create_logger = staticmethod(create_logger)
