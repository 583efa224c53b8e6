"""
Repository acquisition domain module
"""
from .system import command_exists, command_path, is_macos, is_ubuntu
from .fetch import download, extract
from .service import repo_name_from_url, repo_git, repo_zip, repo_get, repo_run

__all__ = [
    "command_exists",
    "command_path",
    "is_macos",
    "is_ubuntu",
    "download",
    "extract",
    "repo_name_from_url",
    "repo_git",
    "repo_zip",
    "repo_get",
    "repo_run",
]
