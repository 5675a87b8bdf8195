"""Handler adapters implementing HandlerPort."""

from typedlog.adapters.handlers.base import BaseHandler
from typedlog.adapters.handlers.composite import CompositeHandler
from typedlog.adapters.handlers.console import ConsoleHandler
from typedlog.adapters.handlers.file import FileHandler
from typedlog.adapters.handlers.in_memory import InMemoryHandler
from typedlog.adapters.handlers.locked import LockedHandler

__all__ = [
    "BaseHandler",
    "CompositeHandler",
    "ConsoleHandler",
    "FileHandler",
    "InMemoryHandler",
    "LockedHandler",
]
