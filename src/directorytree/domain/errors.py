from __future__ import annotations

"""
Domain Exceptions.

Failure taxonomy of the tree generator. Only the root validation failure
is fatal for a run; node access failures are recovered by the walker.
"""


class DirectoryTreeError(Exception):
    """Base class for every error raised by the tree generator."""


class InvalidRootError(DirectoryTreeError):
    """The configured root does not exist, is not a directory, or cannot be listed."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Invalid directory path: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NodeAccessError(DirectoryTreeError):
    """A directory below the root could not be listed."""

    def __init__(self, path: str, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error accessing: {path}")
