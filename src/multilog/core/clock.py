from __future__ import annotations
from datetime import datetime
from typing import Callable, Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], datetime]

def timestamp(clock: Optional[Clock] = None) -> str:
    """Local wall-clock time at second precision, e.g. ``2024-03-01 09:15:02``."""
    now = clock() if clock is not None else datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)
