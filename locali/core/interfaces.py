"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod


class PromptProvider(ABC):
    """Operator prompt interface"""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask a yes/no question, True only for an explicit yes"""
        pass


class Notifier(ABC):
    """Progress notification interface"""

    @abstractmethod
    def info(self, message: str) -> None:
        """Informational progress line"""
        pass

    @abstractmethod
    def noti(self, message: str) -> None:
        """Milestone line"""
        pass
