"""Formatters that turn source files into resource data, and their registry."""

from abc import ABC, abstractmethod


class Formatter(ABC):
    """Converts a source file into the bytes stored for a resource."""

    @abstractmethod
    def format(self, file_name, output):
        """Read ``file_name`` and write the converted data into ``output``."""


class FormatRegistry:
    """Named collection of formatters."""

    def __init__(self):
        self._formatters = {}

    def register(self, name, formatter):
        """Make ``formatter`` available under ``name``, replacing any previous one."""
        if not isinstance(formatter, Formatter):
            raise TypeError(f"expected a Formatter, got {type(formatter).__name__}")
        self._formatters[name] = formatter

    def get(self, name):
        """Return the formatter registered under ``name``, or None."""
        return self._formatters.get(name)

    def __contains__(self, name):
        return name in self._formatters


format_registry = FormatRegistry()