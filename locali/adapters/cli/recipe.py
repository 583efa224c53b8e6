"""
Recipe CLI commands
"""
from typing import List

import typer
from rich.table import Table

from ...core.exceptions import LocaliError
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...domain.recipe import RecipeRunner, SudoKeeper, discover_recipes
from .state import get_state

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_recipe_commands(app: typer.Typer) -> None:
    """Register recipe commands on the main app"""
    app.command(name="run")(recipe_run)
    app.command(name="recipes")(recipe_list)


def recipe_run(
    ctx: typer.Context,
    recipes: List[str] = typer.Argument(..., help="Names of recipes to run, in order"),
    sudo: bool = typer.Option(
        False, "--sudo", help="Ask for sudo once and keep it alive while recipes run"
    ),
):
    """
    Run recipes in order, stopping at the first failure

    Examples:
        locali run git-tools fzf
        locali run --sudo apt-basics
    """
    state = get_state(ctx)
    runner = RecipeRunner(state.recipe_context())
    keeper = SudoKeeper() if sudo else None

    try:
        if keeper:
            keeper.start()
        report = runner.run(recipes)
    except LocaliError as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Failed to run recipes")
        stderr_console.print(f"[red]Error:[/red] Failed to run recipes: {e}")
        raise typer.Exit(1)
    finally:
        if keeper:
            keeper.stop()

    if not report.ok:
        raise typer.Exit(1)


def recipe_list(
    ctx: typer.Context,
    plain: bool = typer.Option(
        False, "--plain", help="Print 'name:description' lines (for shell completion)"
    ),
):
    """List available recipes"""
    state = get_state(ctx)

    try:
        recipes = discover_recipes(state.settings.recipe_dirs)
    except LocaliError as e:
        stderr_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if plain:
        for name, recipe in recipes.items():
            stdout_console.print(f"{name}:{recipe.description}", markup=False, soft_wrap=True)
        return

    if not recipes:
        stdout_console.print("[yellow]No recipes found[/yellow]")
        return

    table = Table(title="Recipes")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Path", style="dim")
    for name, recipe in recipes.items():
        table.add_row(name, recipe.description, str(recipe.path))
    stdout_console.print(table)
