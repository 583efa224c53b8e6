"""
rc file domain models
"""
from dataclasses import dataclass
from enum import Enum

from ...core.constants import LABEL_PREFIX


class AppendResult(Enum):
    """Outcome of an idempotent append"""
    APPENDED = "appended"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ConfigBlock:
    """
    A labeled block of configuration text.

    A block is present in a file when its rendered text (label line plus
    body) occurs anywhere in the file as a contiguous substring.
    """
    label: str
    body: str

    def render(self) -> str:
        """Label line followed by the body"""
        return f"{LABEL_PREFIX}{self.label}\n{self.body}"
