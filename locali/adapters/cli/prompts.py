"""
Rich-based operator prompts and notifications
"""
import sys
from typing import Callable, Optional

import typer
from rich.console import Console

from ...core.constants import INFO_PREFIX, NOTI_PREFIX, PROMPT_PREFIX, YES_NO_SUFFIX
from ...core.interfaces import Notifier, PromptProvider
from ...core.logging import get_logger, get_stdout_console

logger = get_logger(__name__)


def read_char() -> str:
    """
    Read one character from the operator.

    A single keypress on a terminal, otherwise one character from stdin
    (empty string at end of input).
    """
    if sys.stdin.isatty():
        return typer.getchar()
    return sys.stdin.read(1)


class RichPromptProvider(PromptProvider):
    """Rich-based prompt provider"""
    
    def __init__(
        self,
        console: Optional[Console] = None,
        reader: Optional[Callable[[], str]] = None,
    ):
        self.console = console or get_stdout_console()
        self.reader = reader or read_char
    
    def confirm(self, question: str) -> bool:
        """
        Ask a yes/no question answered by a single character.

        Only 'y' or 'Y' counts as yes.
        """
        self.console.print(f"{PROMPT_PREFIX}{question}{YES_NO_SUFFIX}", end="", markup=False, soft_wrap=True)
        answer = self.reader()
        self.console.print()
        logger.debug(f"Answer to {question!r}: {answer!r}")
        return answer in ("y", "Y")


class ConsoleNotifier(Notifier):
    """Prints progress lines with the '- ' and '* ' prefixes"""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_stdout_console()
    
    def info(self, message: str) -> None:
        logger.debug(message)
        self.console.print(f"{INFO_PREFIX}{message}", markup=False, soft_wrap=True)
    
    def noti(self, message: str) -> None:
        logger.debug(message)
        self.console.print(f"{NOTI_PREFIX}{message}", markup=False, soft_wrap=True)
