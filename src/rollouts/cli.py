"""Rollouts CLI - browse and resolve recorded conversation sessions."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from rollouts import __version__
from rollouts.sessions.errors import DirectoryReadError
from rollouts.sessions.store import SessionStore

app = typer.Typer(
    name="rollouts",
    help="List and resolve recorded conversation sessions.",
    no_args_is_help=True,
)
mcp_app = typer.Typer(help="MCP server management.")

app.add_typer(mcp_app, name="mcp")

console = Console()

RootOption = Annotated[
    Optional[Path],
    typer.Option("--root", "-r", help="Sessions root directory (default: $CODEX_HOME/sessions)"),
]


def version_callback(value: bool) -> None:
    if value:
        console.print(f"rollouts {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log skipped files and directory faults")
    ] = False,
) -> None:
    """Rollouts - list and resolve recorded conversation sessions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail_on_directory_error(e: DirectoryReadError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    raise typer.Exit(1)


# ── Session commands ─────────────────────────────────────────────


@app.command("list")
def sessions_list(
    root: RootOption = None,
    limit: Annotated[
        Optional[int], typer.Option("--limit", "-n", min=1, help="Show at most N sessions")
    ] = None,
) -> None:
    """List sessions, most recently modified first."""
    from rollouts.display import sessions_table

    try:
        sessions = SessionStore(root).list_sessions()
    except DirectoryReadError as e:
        _fail_on_directory_error(e)

    if not sessions:
        console.print("[dim]No conversation sessions found.[/dim]")
        return

    if limit is not None:
        sessions = sessions[:limit]

    console.print(sessions_table(sessions))
    console.print("[dim]Use 'rollouts find <session_id>' to locate a specific session[/dim]")
    console.print("[dim]Use 'rollouts last' to show the most recent session[/dim]")


@app.command("last")
def sessions_last(root: RootOption = None) -> None:
    """Show the most recently modified session."""
    try:
        session = SessionStore(root).get_last_session()
    except DirectoryReadError as e:
        _fail_on_directory_error(e)

    if session is None:
        console.print("[yellow]No conversation sessions found.[/yellow]")
        raise typer.Exit(1)

    console.print(f"[green]{session.id}[/green]")
    console.print(f"  Path: {escape(str(session.path))}")
    console.print(f"  Messages: {session.message_count}")
    if session.git_branch:
        console.print(f"  Branch: {escape(session.git_branch)}")


@app.command("find")
def sessions_find(
    query: Annotated[str, typer.Argument(help="Session id, id prefix, or path to a .jsonl file")],
    root: RootOption = None,
) -> None:
    """Resolve a session id or prefix to its rollout file."""
    try:
        path = SessionStore(root).find_session(query)
    except DirectoryReadError as e:
        _fail_on_directory_error(e)

    if path is None:
        console.print(f"[red]Session not found:[/red] {escape(query)}")
        raise typer.Exit(1)

    console.print(escape(str(path)), soft_wrap=True)


# ── MCP commands ─────────────────────────────────────────────────


@mcp_app.command("serve")
def mcp_serve() -> None:
    """Start the MCP server (stdio transport)."""
    from rollouts.mcp.server import mcp

    mcp.run()
