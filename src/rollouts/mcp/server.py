"""MCP server exposing the session store to agents."""

from mcp.server.fastmcp import FastMCP

from rollouts.sessions.models import SessionSummary
from rollouts.sessions.store import SessionStore

mcp = FastMCP("rollouts")
store = SessionStore()


def _session_to_dict(session: SessionSummary) -> dict:
    return session.model_dump(mode="json")


@mcp.tool()
def list_sessions(limit: int = 20) -> list[dict]:
    """Browse recorded conversation sessions, most recently modified first.

    Each entry has the session id, rollout file path, header timestamp,
    instructions, message count, git branch, and modification/creation times.

    Args:
        limit: Maximum results to return (default 20)
    """
    return [_session_to_dict(s) for s in store.list_sessions()[:limit]]


@mcp.tool()
def get_last_session() -> dict | str:
    """Get the most recently modified session.

    Use this to pick up where the previous conversation left off.
    """
    session = store.get_last_session()
    if not session:
        return "No conversation sessions found"
    return _session_to_dict(session)


@mcp.tool()
def find_session(query: str) -> dict | str:
    """Resolve a session id, id prefix, or rollout file path to its file.

    Prefixes are matched case-insensitively; when several sessions share the
    prefix the most recently modified one wins.

    Args:
        query: Full session id, leading part of an id, or path to a .jsonl file
    """
    path = store.find_session(query)
    if path is None:
        return f"Session {query} not found"
    return {"query": query, "path": str(path)}
