"""
Per-invocation CLI state
"""
from dataclasses import dataclass

import typer

from ...core.interfaces import Notifier, PromptProvider
from ...core.settings import LocalSettings
from ...domain.recipe import RecipeContext


@dataclass
class CliState:
    """Settings and operator I/O shared by all commands of one invocation"""
    settings: LocalSettings
    prompt: PromptProvider
    notifier: Notifier

    def recipe_context(self) -> RecipeContext:
        return RecipeContext(settings=self.settings, prompt=self.prompt, notifier=self.notifier)


def get_state(ctx: typer.Context) -> CliState:
    """State stored by the main callback"""
    state = ctx.find_object(CliState)
    if state is None:
        raise RuntimeError("CLI state not initialised")
    return state
