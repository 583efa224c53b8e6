"""
Link and path CLI commands
"""
from pathlib import Path
from typing import Optional

import typer

from ...core.exceptions import LocaliError
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.paths import resolve_real_dir
from ...domain.link import numbered, symlink
from .state import get_state

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_link_commands(app: typer.Typer) -> None:
    """Register link commands on the main app"""
    app.command(name="link")(link_create)
    app.command(name="backup-name")(backup_name)
    app.command(name="realdir")(realdir)


def link_create(
    ctx: typer.Context,
    src: Path = typer.Argument(..., help="Existing path the link points to"),
    dst: Path = typer.Argument(..., help="Where the link is created"),
):
    """
    Create a symlink, backing up whatever is in the way

    Examples:
        locali link ~/.local/repo/dotfiles/vimrc ~/.vimrc
    """
    state = get_state(ctx)

    try:
        outcome = symlink(src.expanduser(), dst.expanduser(), state.prompt, state.notifier)
    except (LocaliError, OSError) as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not outcome.ok:
        raise typer.Exit(1)


def backup_name(
    path: Path = typer.Argument(..., help="Desired path"),
):
    """Print the first free numbered variant of a path"""
    stdout_console.print(str(numbered(path.expanduser())), markup=False, soft_wrap=True)


def realdir(
    path: Optional[str] = typer.Argument(None, help="Path to resolve (default: current directory)"),
):
    """Print the real directory of a path, following symlinks"""
    try:
        resolved = resolve_real_dir(path or "")
    except LocaliError as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    stdout_console.print(str(resolved), markup=False, soft_wrap=True)
