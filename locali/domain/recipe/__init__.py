"""
Recipe domain module
"""
from .models import Recipe, RecipeContext, RecipeResult, RecipeStep, RunReport
from .recipes import TomlRecipe, ShellRecipe
from .loader import discover_recipes, load_recipe, parse_recipe_file
from .runner import RecipeRunner
from .sudo import SudoKeeper

__all__ = [
    "Recipe",
    "RecipeContext",
    "RecipeResult",
    "RecipeStep",
    "RunReport",
    "TomlRecipe",
    "ShellRecipe",
    "discover_recipes",
    "load_recipe",
    "parse_recipe_file",
    "RecipeRunner",
    "SudoKeeper",
]
