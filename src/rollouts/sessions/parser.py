"""Parse rollout files into session summaries.

A rollout is newline-delimited JSON. The first line is the session header,
every following line is a body record. Headers come in two shapes:

    {"id": "...", "timestamp": "...", "instructions": "..."}
    {"id": "...", "timestamp": "...", "git": {"branch": "main"}}

Only ``id`` and ``timestamp`` are required. Everything else is picked out
leniently so old and new files can live side by side in one store.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError

from rollouts.config import RECORD_TYPE_KEY
from rollouts.sessions.errors import FileReadError, InvalidFormatError
from rollouts.sessions.models import SessionHeader, SessionSummary


class _RequiredHeader(BaseModel):
    id: UUID
    timestamp: str


def _split_lines(text: str) -> list[str]:
    # Only "\n" terminates a record; JSON strings may legally hold U+2028 etc.
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def parse_header(line: str) -> SessionHeader:
    """Parse the first line of a rollout into a SessionHeader."""
    try:
        raw = json.loads(line)
    except (ValueError, RecursionError) as e:
        raise InvalidFormatError(f"Failed to parse session metadata: {e}") from e

    try:
        required = _RequiredHeader.model_validate(raw)
    except ValidationError as e:
        raise InvalidFormatError(f"Failed to parse session metadata: {e}") from e

    # raw is a dict here, otherwise validation above would have failed
    git = raw.get("git")
    git_branch = _optional_str(git.get("branch")) if isinstance(git, dict) else None

    return SessionHeader(
        id=required.id,
        timestamp=required.timestamp,
        instructions=_optional_str(raw.get("instructions")),
        git_branch=git_branch,
    )


def is_conversation_record(item: Any) -> bool:
    """True for body records that are conversation items, not state."""
    return not (isinstance(item, dict) and RECORD_TYPE_KEY in item)


def count_messages(lines: list[str]) -> int:
    """Count conversation records among body lines, dropping unparsable ones."""
    count = 0
    for line in lines:
        if not line.strip():
            continue
        try:
            item = json.loads(line)
        except (ValueError, RecursionError):
            continue
        if is_conversation_record(item):
            count += 1
    return count


def parse_rollout(data: bytes | str) -> tuple[SessionHeader, int]:
    """Parse rollout content into its header and conversation message count."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFormatError(f"Session file is not valid UTF-8: {e}") from e

    lines = _split_lines(data)
    if not lines:
        raise InvalidFormatError("Empty session file")

    header = parse_header(lines[0])
    return header, count_messages(lines[1:])


def _to_datetime(ts: float) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def parse_session_file(path: Path) -> SessionSummary:
    """Parse a rollout file into a SessionSummary.

    Raises a SessionParseError subclass when the file cannot be read or its
    header is malformed. Callers listing a whole store should skip the file.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileReadError(f"Failed to read {path}: {e}", path=path) from e

    try:
        header, message_count = parse_rollout(data)
    except InvalidFormatError as e:
        raise InvalidFormatError(str(e), path=path) from e

    try:
        st = path.stat()
    except OSError as e:
        raise FileReadError(f"Failed to stat {path}: {e}", path=path) from e

    last_modified = _to_datetime(st.st_mtime)
    birthtime = getattr(st, "st_birthtime", None)
    created_time = _to_datetime(birthtime) if birthtime is not None else last_modified

    return SessionSummary(
        id=header.id,
        path=path,
        timestamp=header.timestamp,
        instructions=header.instructions,
        message_count=message_count,
        last_modified=last_modified,
        created_time=created_time,
        git_branch=header.git_branch,
    )
