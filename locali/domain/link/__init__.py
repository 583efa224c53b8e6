"""
Link domain module
"""
from .models import LinkOutcome, LinkRecord
from .backup import numbered
from .installer import install_link, symlink, repo_bin, repo_sym

__all__ = [
    "LinkOutcome",
    "LinkRecord",
    "numbered",
    "install_link",
    "symlink",
    "repo_bin",
    "repo_sym",
]
