"""Tests for MCP server tools."""

import pytest

from rollouts.sessions.store import SessionStore

SESSION_ID = "3fae2b0a-0000-4000-8000-000000000001"
NEWER_ID = "3fae2bcc-0000-4000-8000-000000000002"


@pytest.fixture(autouse=True)
def mock_store(sessions_root, monkeypatch):
    """Point the MCP server's store at a temp sessions root."""
    import rollouts.mcp.server as server_mod

    store = SessionStore(root=sessions_root)
    monkeypatch.setattr(server_mod, "store", store)
    return store


class TestMCPTools:
    def test_list_sessions(self, write_rollout):
        from rollouts.mcp.server import list_sessions

        write_rollout(SESSION_ID, body=[{"type": "message"}], mtime=1_700_000_000)
        write_rollout(NEWER_ID, header_extra={"git": {"branch": "dev"}}, mtime=1_700_000_100)

        results = list_sessions()
        assert [r["id"] for r in results] == [NEWER_ID, SESSION_ID]
        assert results[0]["git_branch"] == "dev"
        assert results[1]["message_count"] == 1
        assert isinstance(results[0]["path"], str)

    def test_list_sessions_limit(self, write_rollout):
        from rollouts.mcp.server import list_sessions

        write_rollout(SESSION_ID)
        write_rollout(NEWER_ID)
        assert len(list_sessions(limit=1)) == 1

    def test_get_last_session(self, write_rollout):
        from rollouts.mcp.server import get_last_session

        write_rollout(SESSION_ID, mtime=1_700_000_000)
        write_rollout(NEWER_ID, mtime=1_700_000_100)

        result = get_last_session()
        assert isinstance(result, dict)
        assert result["id"] == NEWER_ID

    def test_get_last_session_empty(self):
        from rollouts.mcp.server import get_last_session

        result = get_last_session()
        assert isinstance(result, str)
        assert "No conversation sessions" in result

    def test_find_session(self, write_rollout):
        from rollouts.mcp.server import find_session

        path = write_rollout(SESSION_ID)
        result = find_session("3fae2b0a")
        assert isinstance(result, dict)
        assert result["path"] == str(path)

    def test_find_session_not_found(self):
        from rollouts.mcp.server import find_session

        result = find_session("nonexistent")
        assert isinstance(result, str)
        assert "not found" in result
