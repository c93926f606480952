from __future__ import annotations


class NotegraphError(Exception):
    """Base class for errors raised by notegraph."""


class MalformedFilenameError(NotegraphError, ValueError):
    """A note path whose basename has no extension segment."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"malformed note filename {path!r}: {reason}")
        self.path = path
        self.reason = reason
