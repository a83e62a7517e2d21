from .base import OutputAdapter, FileBackedAdapter, registry
from .console import ConsoleAdapter
from .file import FileAdapter
from .html import HtmlAdapter

__all__ = [
    "OutputAdapter", "FileBackedAdapter", "registry",
    "ConsoleAdapter", "FileAdapter", "HtmlAdapter",
]
