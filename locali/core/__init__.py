"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import PromptProvider, Notifier
from .settings import LocalSettings, ensure_layout, path_with_local_bin
from .paths import resolve_real_dir, abspath, lexists

__all__ = [
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "PromptProvider",
    "Notifier",
    "LocalSettings",
    "ensure_layout",
    "path_with_local_bin",
    "resolve_real_dir",
    "abspath",
    "lexists",
]
