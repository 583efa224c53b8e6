"""
Pytest configuration and shared fixtures for locali tests.
"""
from pathlib import Path
from typing import List

import pytest

from locali.core.interfaces import Notifier, PromptProvider
from locali.core.settings import LocalSettings, ensure_layout


class RecordingNotifier(Notifier):
    """Collects notifications instead of printing them"""

    def __init__(self):
        self.lines: List[str] = []

    def info(self, message: str) -> None:
        self.lines.append(f"- {message}")

    def noti(self, message: str) -> None:
        self.lines.append(f"* {message}")


class ScriptedPrompt(PromptProvider):
    """Answers confirmations from a fixed list and records the questions"""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.questions: List[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return bool(self.answers.pop(0)) if self.answers else False


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def settings(home: Path) -> LocalSettings:
    """Settings rooted in a temporary home, layout created"""
    s = LocalSettings.from_config({"recipe_dirs": [str(home / "recipes")]}, home=home)
    ensure_layout(s)
    return s
