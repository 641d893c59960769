"""
Built-in formatter registrations.
register_all_builtins() is called on import of timemacro.macros.
"""

from .registry import formatter_registry
from . import formatters


def register_all_builtins() -> None:
    """Register every built-in formatter with the shared registry."""
    formatters.register(formatter_registry)
