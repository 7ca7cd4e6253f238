"""Configuration and directory locations for rollouts."""

import os
from pathlib import Path

CODEX_HOME = Path(os.environ.get("CODEX_HOME") or Path.home() / ".codex")
SESSIONS_SUBDIR = "sessions"
SESSIONS_DIR = CODEX_HOME / SESSIONS_SUBDIR

# Rollout file naming: rollout-<anything>.jsonl
ROLLOUT_PREFIX = "rollout-"
ROLLOUT_SUFFIX = ".jsonl"

# Body records carrying this key are internal state, not conversation messages
RECORD_TYPE_KEY = "record_type"


def is_rollout_name(name: str) -> bool:
    """Check whether a file name follows the rollout naming pattern."""
    return name.startswith(ROLLOUT_PREFIX) and name.endswith(ROLLOUT_SUFFIX)
