"""Formatting helpers for rendering session listings."""

from datetime import datetime, timezone

from rich.markup import escape
from rich.table import Table

from rollouts.sessions.models import SessionSummary

BRANCH_WIDTH = 14
SUMMARY_WIDTH = 50


def truncate(text: str, limit: int) -> str:
    """Cut text to at most limit characters, marking the cut with '...'."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."


def format_time_ago(when: datetime, now: datetime | None = None) -> str:
    """Render a timestamp relative to now, e.g. '5m ago'."""
    now = now or datetime.now(timezone.utc)
    secs = int((now - when).total_seconds())

    if secs < 60:
        return "just now"
    if secs < 3600:
        return f"{secs // 60}m ago"
    if secs < 86400:
        return f"{secs // 3600}h ago"
    return f"{secs // 86400}d ago"


def sessions_table(sessions: list[SessionSummary], now: datetime | None = None) -> Table:
    """Build a rich table of sessions in listing order."""
    table = Table(title="Sessions")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Modified", style="cyan")
    table.add_column("Created", style="cyan")
    table.add_column("# Messages", justify="right")
    table.add_column("Git Branch", style="green")
    table.add_column("Summary")
    table.add_column("ID", style="dim")

    for index, session in enumerate(sessions, start=1):
        branch = truncate(session.git_branch, BRANCH_WIDTH) if session.git_branch is not None else "-"
        summary = (
            truncate(session.instructions, SUMMARY_WIDTH)
            if session.instructions is not None
            else "No summary available"
        )
        table.add_row(
            str(index),
            format_time_ago(session.last_modified, now),
            format_time_ago(session.created_time, now),
            str(session.message_count),
            escape(branch),
            escape(summary),
            str(session.id),
        )

    return table
