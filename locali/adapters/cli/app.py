"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from ...core.exceptions import LocaliError
from ...core.logging import setup_logging, get_logger, get_stderr_console
from ...core.settings import ensure_layout
from ..config.loader import ConfigLoader
from .link import register_link_commands
from .prompts import ConsoleNotifier, RichPromptProvider
from .rcfile import register_rc_commands
from .recipe import register_recipe_commands
from .state import CliState

logger = get_logger(__name__)
stderr_console = get_stderr_console()

app = typer.Typer(
    name="locali",
    add_completion=False,
    help="Local environment bootstrapper",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_recipe_commands(app)
register_link_commands(app)
register_rc_commands(app)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: ~/.config/locali/config.toml)",
    ),
    local_root: Optional[Path] = typer.Option(
        None,
        "--root",
        help="Local root directory (default: ~/.local)",
    ),
):
    """
    locali - bootstrap a machine from recipes

    Use subcommands to perform different operations:
    - run: Run recipes in order
    - recipes: List available recipes
    - link: Create a symlink with backup
    - rc: Append a labeled block to ~/.localrc
    """
    setup_logging(level=log_level, log_file=log_file)

    try:
        settings = ConfigLoader().load_settings(
            toml_path=config,
            cli_overrides={"local_root": str(local_root) if local_root else None},
        )
        ensure_layout(settings)
    except (LocaliError, OSError) as e:
        stderr_console.print(f"[red]Config Error:[/red] {e}")
        raise typer.Exit(1)

    logger.debug(f"Settings: {settings}")
    ctx.obj = CliState(
        settings=settings,
        prompt=RichPromptProvider(),
        notifier=ConsoleNotifier(),
    )


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
