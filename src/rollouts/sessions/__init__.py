"""Session store: discover, parse, list and resolve rollout files."""

from rollouts.sessions.errors import (
    DirectoryReadError,
    FileReadError,
    InvalidFormatError,
    SessionParseError,
    SessionStoreError,
)
from rollouts.sessions.models import SessionHeader, SessionSummary
from rollouts.sessions.store import SessionStore

__all__ = [
    "DirectoryReadError",
    "FileReadError",
    "InvalidFormatError",
    "SessionHeader",
    "SessionParseError",
    "SessionStore",
    "SessionStoreError",
    "SessionSummary",
]
