"""
Recipe discovery and parsing
"""
import tomllib
from pathlib import Path
from typing import Dict, Iterable, List

from ...core.constants import LABEL_PREFIX, RECIPE_SHELL_SUFFIX, RECIPE_TOML_SUFFIX
from ...core.exceptions import RecipeError, RecipeNotFoundError
from .models import Recipe, RecipeStep
from .recipes import ShellRecipe, TomlRecipe
from .steps import validate_step

RECIPE_SUFFIXES = (RECIPE_TOML_SUFFIX, RECIPE_SHELL_SUFFIX)


def shell_description(path: Path) -> str:
    """Description from a leading '# ' comment line, else empty"""
    try:
        with path.open(encoding="utf-8") as f:
            first_line = f.readline().rstrip("\n")
    except OSError:
        return ""
    if first_line.startswith(LABEL_PREFIX) and not first_line.startswith("#!"):
        return first_line[len(LABEL_PREFIX):]
    return ""


def parse_steps(cfg: Dict) -> List[RecipeStep]:
    """Parse [[step]] items of a TOML recipe"""
    steps = []
    for item in cfg.get("step", []):
        if not isinstance(item, dict) or not isinstance(item.get("kind"), str):
            raise RecipeError(f"Each step needs a 'kind': {item!r}")
        params = {k: v for k, v in item.items() if k != "kind"}
        step = RecipeStep(kind=item["kind"], params=params)
        validate_step(step)
        steps.append(step)
    return steps


def parse_recipe_file(path: Path) -> Recipe:
    """
    Build a recipe from a file.

    Raises:
        RecipeError: If the file is malformed or of an unknown type
    """
    name = path.stem
    if path.suffix == RECIPE_SHELL_SUFFIX:
        return ShellRecipe(name, path, shell_description(path))

    if path.suffix == RECIPE_TOML_SUFFIX:
        try:
            cfg = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise RecipeError(f"Failed to parse recipe {path}: {e}") from e
        try:
            steps = parse_steps(cfg)
        except RecipeError as e:
            raise RecipeError(f"{path}: {e}") from e
        return TomlRecipe(name, path, steps, str(cfg.get("description", "")))

    raise RecipeError(f"Unknown recipe type: {path}")


def _candidates(dirs: Iterable[Path]):
    for directory in dirs:
        directory = Path(directory)
        if not directory.is_dir():
            continue
        for path in sorted(directory.iterdir()):
            if path.is_file() and path.suffix in RECIPE_SUFFIXES:
                yield path


def discover_recipes(dirs: Iterable[Path]) -> Dict[str, Recipe]:
    """
    All recipes in the given directories, sorted by name.

    An earlier directory shadows a later one; within a directory a TOML
    recipe shadows a shell recipe of the same name.
    """
    found: Dict[str, Path] = {}
    for path in _candidates(dirs):
        current = found.get(path.stem)
        if current is None:
            found[path.stem] = path
        elif current.parent == path.parent and path.suffix == RECIPE_TOML_SUFFIX:
            found[path.stem] = path
    return {name: parse_recipe_file(found[name]) for name in sorted(found)}


def load_recipe(dirs: Iterable[Path], name: str) -> Recipe:
    """
    Find a single recipe by name.

    Raises:
        RecipeNotFoundError: If no directory holds the recipe
    """
    for directory in dirs:
        directory = Path(directory)
        for suffix in RECIPE_SUFFIXES:
            path = directory / f"{name}{suffix}"
            if path.is_file():
                return parse_recipe_file(path)
    raise RecipeNotFoundError(f"Recipe not found: {name}")
