"""
Sequential recipe runner
"""
from pathlib import Path
from typing import Callable, Iterable, Optional

from ...core.exceptions import LocaliError
from ...core.logging import get_logger
from .loader import load_recipe
from .models import Recipe, RecipeContext, RecipeResult, RunReport

logger = get_logger(__name__)


class RecipeRunner:
    """
    Runs recipes one after another, stopping at the first failure.

    Recipes are looked up by name in the settings' recipe directories unless
    a custom resolver is given.
    """

    def __init__(
        self,
        context: RecipeContext,
        resolver: Optional[Callable[[str], Recipe]] = None,
    ):
        self.context = context
        self.resolver = resolver or self._load

    def _load(self, name: str) -> Recipe:
        dirs: Iterable[Path] = self.context.settings.recipe_dirs
        return load_recipe(dirs, name)

    def run_one(self, name: str) -> RecipeResult:
        """Resolve and run a single recipe, turning errors into a failed result"""
        try:
            recipe = self.resolver(name)
            return recipe.run(self.context)
        except (LocaliError, OSError) as e:
            logger.debug(f"[recipe] {name} raised", exc_info=True)
            return RecipeResult(name, False, str(e))

    def run(self, names: Iterable[str]) -> RunReport:
        report = RunReport()
        notifier = self.context.notifier

        for name in names:
            notifier.noti(f"Run: '{name}'")
            result = self.run_one(name)
            report.results.append(result)

            if result.ok:
                notifier.noti(f"Done: '{name}'")
                continue

            if result.message:
                notifier.info(result.message)
            notifier.noti(f"Abort: '{name}'")
            break

        return report
