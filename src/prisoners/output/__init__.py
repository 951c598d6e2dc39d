"""Output formatting."""

from .console import ConsoleOutput

__all__ = ["ConsoleOutput"]
