"""
Recipe domain models
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from ...core.interfaces import Notifier, PromptProvider
from ...core.settings import LocalSettings

StepKind = Literal[
    "git", "zip", "get", "bin", "sym", "link", "rc", "content", "file", "run", "shell"
]


@dataclass
class RecipeContext:
    """Everything a recipe needs to touch the machine"""
    settings: LocalSettings
    prompt: PromptProvider
    notifier: Notifier


@dataclass
class RecipeResult:
    """Result of running one recipe"""
    name: str
    ok: bool
    message: Optional[str] = None


@dataclass
class RecipeStep:
    """
    Single step of a TOML recipe

    Attributes:
        kind: What the step does (see steps.STEP_HANDLERS)
        params: Step parameters as written in the recipe file
    """
    kind: StepKind
    params: Dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        """Short human-readable form for logs"""
        main = next(iter(self.params.values()), "")
        return f"{self.kind} {main}".strip()


class Recipe(ABC):
    """A named unit of provisioning logic"""

    def __init__(self, name: str, path: Path, description: str = ""):
        self.name = name
        self.path = path
        self.description = description

    @abstractmethod
    def run(self, context: RecipeContext) -> RecipeResult:
        """Run the recipe to completion"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, path={str(self.path)!r})"


@dataclass
class RunReport:
    """Outcome of a run over several recipes"""
    results: List[RecipeResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failed(self) -> Optional[RecipeResult]:
        return next((r for r in self.results if not r.ok), None)
