"""Shared fixtures for session store tests."""

import json
import os

import pytest

HEADER_TIMESTAMP = "2024-01-01T00:00:00Z"


@pytest.fixture
def sessions_root(tmp_path):
    root = tmp_path / "sessions"
    root.mkdir()
    return root


@pytest.fixture
def write_rollout(sessions_root):
    """Factory writing a rollout file with a header and body records."""

    def _write(
        session_id,
        body=(),
        subdir="2024/01/01",
        name=None,
        mtime=None,
        header_extra=None,
    ):
        directory = sessions_root / subdir if subdir else sessions_root
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / (name or f"rollout-2024-01-01T00-00-00-{session_id}.jsonl")

        header = {"id": session_id, "timestamp": HEADER_TIMESTAMP}
        header.update(header_extra or {})
        lines = [json.dumps(header)]
        lines.extend(r if isinstance(r, str) else json.dumps(r) for r in body)
        path.write_text("\n".join(lines) + "\n")

        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
