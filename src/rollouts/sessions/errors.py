"""Errors raised while scanning and parsing the session store."""

from pathlib import Path


class SessionStoreError(Exception):
    """Base class for session store failures."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)


class DirectoryReadError(SessionStoreError):
    """A directory under the sessions root could not be enumerated.

    Fatal for the listing call that hit it.
    """


class SessionParseError(SessionStoreError):
    """A single rollout file could not be turned into a summary.

    Callers skip the file and carry on with the rest of the store.
    """


class FileReadError(SessionParseError):
    """The file or its metadata could not be read."""


class InvalidFormatError(SessionParseError):
    """The file is empty or its header record is malformed."""


__all__ = [
    "DirectoryReadError",
    "FileReadError",
    "InvalidFormatError",
    "SessionParseError",
    "SessionStoreError",
]
