"""
Host inspection helpers
"""
import platform
import shutil
from pathlib import Path
from typing import Optional


def command_exists(name: str) -> bool:
    """Check if a command is on PATH"""
    return shutil.which(name) is not None


def command_path(name: str) -> Optional[str]:
    """Absolute path to a command, or None"""
    return shutil.which(name)


def is_macos() -> bool:
    return platform.system() == "Darwin"


def is_ubuntu() -> bool:
    return platform.system() == "Linux" and Path("/etc/lsb-release").exists()
