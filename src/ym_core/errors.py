"""Exception types for ym-core."""

from __future__ import annotations


class YmCoreError(Exception):
    """Base class for every error raised by ym-core."""


class EmptyPath(YmCoreError):
    """A path string parsed to zero segments."""

    def __init__(self, text: str = "") -> None:
        super().__init__(f"Empty key path: {text!r}")
        self.text = text


class InvalidPattern(YmCoreError):
    """A search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid regex pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class SourceNotFound(YmCoreError):
    """The source path of a copy / move does not exist in its document."""

    def __init__(self, path: str, label: str | None = None) -> None:
        where = f" in '{label}'" if label else ""
        super().__init__(f"Key '{path}' not found{where}")
        self.path = path
        self.label = label


class InvalidLocation(YmCoreError):
    """A ``file:path`` token could not be parsed."""


class DocumentError(YmCoreError):
    """A document could not be read, parsed or written."""

    def __init__(self, message: str, label: str | None = None) -> None:
        super().__init__(message)
        self.label = label
