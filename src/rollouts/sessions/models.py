"""Session data models for the rollout store."""

from datetime import datetime
from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SessionHeader(BaseModel):
    """Session-level metadata from the first line of a rollout file."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    timestamp: str
    instructions: str | None = None
    git_branch: str | None = None


class SessionSummary(BaseModel):
    """A listing entry for one rollout file."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    path: Path
    timestamp: str
    instructions: str | None = None
    message_count: int = Field(ge=0, description="Conversation records after the header")
    last_modified: datetime
    created_time: datetime = Field(description="Falls back to last_modified when the host has no birth time")
    git_branch: str | None = None
