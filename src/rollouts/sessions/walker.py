"""Discover rollout files under a sessions root."""

import logging
import os
import stat
from pathlib import Path

from rollouts.config import is_rollout_name
from rollouts.sessions.errors import DirectoryReadError

logger = logging.getLogger(__name__)


def _scan(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return list(it)


def discover_rollouts(root: Path) -> list[Path]:
    """Recursively find every rollout-*.jsonl file below root.

    Files may sit at any depth (the usual layout is YYYY/MM/DD, but nothing
    relies on it). A missing root yields an empty list. A directory that
    exists but cannot be enumerated raises DirectoryReadError.
    """
    try:
        st = os.stat(root)
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        logger.error("Failed to read sessions root %s: %s", root, e)
        raise DirectoryReadError(f"Failed to read directory {root}: {e}", path=root) from e
    if not stat.S_ISDIR(st.st_mode):
        return []

    found: list[Path] = []
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            entries = _scan(directory)
        except FileNotFoundError:
            if directory == root:
                return []
            # Removed by another process after we saw it
            logger.debug("Directory vanished during scan: %s", directory)
            continue
        except OSError as e:
            logger.error("Failed to read session directory %s: %s", directory, e)
            raise DirectoryReadError(f"Failed to read directory {directory}: {e}", path=directory) from e

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(Path(entry.path))
                elif entry.is_file() and is_rollout_name(entry.name):
                    found.append(Path(entry.path))
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", entry.path, e)

    return found
