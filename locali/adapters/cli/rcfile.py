"""
rc file CLI commands
"""
import sys
from pathlib import Path
from typing import Optional

import typer

from ...core.exceptions import LocaliError
from ...core.logging import get_logger, get_stderr_console
from ...domain.rcfile import localrc, require_content
from .state import get_state

logger = get_logger(__name__)
stderr_console = get_stderr_console()


def register_rc_commands(app: typer.Typer) -> None:
    """Register rc file commands on the main app"""
    app.command(name="rc")(rc_append)
    app.command(name="append")(content_append)


def _stdin_text() -> str:
    return sys.stdin.read().rstrip("\n")


def rc_append(
    ctx: typer.Context,
    label: str = typer.Argument(..., help="Label written as '# <label>' above the block"),
):
    """
    Append a labeled block read from stdin to the local rc file

    Examples:
        echo 'export EDITOR=vim' | locali rc editor
    """
    state = get_state(ctx)

    try:
        localrc(state.settings, label, _stdin_text(), state.notifier)
    except (LocaliError, OSError) as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def content_append(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Existing file to append to"),
    content: Optional[str] = typer.Argument(None, help="Content (default: read stdin)"),
):
    """Append content to a file unless it is already there"""
    state = get_state(ctx)
    text = content if content is not None else _stdin_text()

    try:
        require_content(path.expanduser(), text, state.notifier)
    except (LocaliError, OSError) as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
