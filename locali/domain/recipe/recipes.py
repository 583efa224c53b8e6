"""
Recipe implementations
"""
import subprocess
from pathlib import Path
from typing import List

from ...core.constants import DEFAULT_SHELL
from ...core.logging import get_logger
from .models import Recipe, RecipeContext, RecipeResult, RecipeStep
from .steps import run_step

logger = get_logger(__name__)


class TomlRecipe(Recipe):
    """
    Recipe declared as an ordered list of steps in a TOML file.

    Steps run in order; the first failing step ends the recipe.
    """

    def __init__(self, name: str, path: Path, steps: List[RecipeStep], description: str = ""):
        super().__init__(name, path, description)
        self.steps = steps

    def run(self, context: RecipeContext) -> RecipeResult:
        for index, step in enumerate(self.steps, start=1):
            failure = run_step(step, context)
            if failure:
                logger.debug(f"[recipe] {self.name} failed at step {index}: {failure}")
                return RecipeResult(self.name, False, f"step {index} ({step.kind}): {failure}")
        return RecipeResult(self.name, True)


class ShellRecipe(Recipe):
    """Recipe that is a bash script run with the local layout exported"""

    def __init__(self, name: str, path: Path, description: str = "", shell: str = DEFAULT_SHELL):
        super().__init__(name, path, description)
        self.shell = shell

    def run(self, context: RecipeContext) -> RecipeResult:
        code = subprocess.run([self.shell, str(self.path)], env=context.settings.environ()).returncode
        if code != 0:
            return RecipeResult(self.name, False, f"exit code {code}")
        return RecipeResult(self.name, True)
