"""Terminal styling for console records.

Color names are the ones colorama knows (``red``, ``green``, ``lightblue_ex``
...) plus ``gray``/``grey``. Unknown names leave the text unstyled rather than
failing, since level colors are free-form in the configuration.
"""
from __future__ import annotations
import os
import re
from typing import Callable

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

_ALIASES = {
    "gray": "LIGHTBLACK_EX",
    "grey": "LIGHTBLACK_EX",
    "purple": "MAGENTA",
}

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

Styler = Callable[[str, str], str]

def colors_disabled() -> bool:
    return os.environ.get("MULTILOG_COLOR_DISABLED") == "1"

def get_color_code(name: str) -> str:
    """ANSI foreground code for a color name, empty string if unknown or disabled."""
    if colors_disabled():
        return ""
    key = _ALIASES.get(name.strip().lower(), name.strip().upper())
    if key == "DIM":
        return Style.DIM
    code = getattr(Fore, key, "")
    return code if isinstance(code, str) else ""

def styled(text: str, color: str) -> str:
    """Wrap text in the color's codes if colors are enabled."""
    code = get_color_code(color)
    if not code:
        return text
    return f"{code}{text}{Style.RESET_ALL}"

def dim(text: str) -> str:
    return styled(text, "dim")

def plain(text: str, color: str) -> str:
    return text

def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)
