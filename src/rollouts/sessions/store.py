"""Rollout-file session store: list sessions and resolve ids to files."""

import logging
import os
from pathlib import Path

from rollouts.config import ROLLOUT_SUFFIX, SESSIONS_DIR
from rollouts.sessions.errors import SessionParseError
from rollouts.sessions.models import SessionSummary
from rollouts.sessions.parser import parse_session_file
from rollouts.sessions.walker import discover_rollouts

logger = logging.getLogger(__name__)


class SessionStore:
    """Read-only view over a directory tree of rollout files.

    Nothing is cached: every call walks and parses the whole tree again.
    """

    def __init__(self, root: Path | None = None):
        self.root = root or SESSIONS_DIR

    def list_sessions(self) -> list[SessionSummary]:
        """List all readable sessions, most recently modified first."""
        sessions = []
        for path in discover_rollouts(self.root):
            try:
                sessions.append(parse_session_file(path))
            except SessionParseError as e:
                logger.debug("Skipping session file %s: %s", path, e)

        # sorted() is stable, ties keep discovery order
        return sorted(sessions, key=lambda s: s.last_modified, reverse=True)

    def get_last_session(self) -> SessionSummary | None:
        """Get the most recently modified session."""
        sessions = self.list_sessions()
        return sessions[0] if sessions else None

    def find_session(self, query: str) -> Path | None:
        """Resolve a rollout path, full session id, or id prefix to a file.

        An existing .jsonl path is returned as-is without scanning the store.
        Otherwise sessions are checked newest first; the id matches when it
        starts with the query ignoring case, or equals the query exactly.
        """
        path = Path(query)
        # os.path.isfile treats any stat failure (e.g. ENAMETOOLONG) as "not a file"
        if path.suffix == ROLLOUT_SUFFIX and os.path.isfile(path):
            return path

        needle = query.lower()
        for session in self.list_sessions():
            id_str = str(session.id)
            # Prefix match ignores case, the exact comparison does not.
            if id_str.lower().startswith(needle) or id_str == query:
                return session.path

        return None
