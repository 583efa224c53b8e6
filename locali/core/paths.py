"""
Path resolution utilities
"""
import os
from pathlib import Path
from typing import Optional, Union

from .exceptions import PathResolveError

PathLike = Union[str, "os.PathLike[str]"]


def _enter(current: str, directory: str) -> str:
    """Logical `cd`: join, normalise and check the directory is traversable"""
    target = os.path.normpath(os.path.join(current, directory))
    if not os.path.isdir(target):
        raise PathResolveError(f"No such directory: {target}")
    if not os.access(target, os.X_OK):
        raise PathResolveError(f"Permission denied: {target}")
    return target


def _strip_trailing_sep(path: str) -> str:
    """'link/' -> 'link', like dirname/basename in the shell"""
    if not path:
        return ""
    return path.rstrip(os.sep) or os.sep


def resolve_real_dir(path: Optional[PathLike] = "", cwd: Optional[PathLike] = None) -> Path:
    """
    Directory a path really lives in, following symlinks.

    Steps into the parent directory of ``path`` and, while the basename is a
    symlink, repeats the same step with the link target. An empty path is the
    current directory.

    Args:
        path: Path to resolve (may be relative or empty)
        cwd: Directory relative paths start from (default: process cwd)

    Returns:
        Absolute directory path

    Raises:
        PathResolveError: If an intermediate directory is missing, not a
            directory, not traversable, or the links form a loop
    """
    current = os.path.abspath(os.fspath(cwd) if cwd is not None else os.getcwd())
    pending = _strip_trailing_sep(os.fspath(path) if path else "")
    seen = set()

    while pending:
        current = _enter(current, os.path.dirname(pending) or ".")
        name = os.path.basename(pending)
        candidate = os.path.join(current, name)

        if (current, name) in seen:
            raise PathResolveError(f"Symlink loop at: {candidate}")
        seen.add((current, name))

        link = os.readlink(candidate) if name and os.path.islink(candidate) else ""
        pending = _strip_trailing_sep(link)

    return Path(current)


def abspath(path: PathLike, cwd: Optional[PathLike] = None) -> Path:
    """
    Absolute form of a path: the directory part is resolved, the basename is
    kept as-is (a symlinked basename is not followed).

    Raises:
        PathResolveError: If the directory part does not exist
    """
    raw = os.fspath(path)
    base = os.path.abspath(os.fspath(cwd) if cwd is not None else os.getcwd())
    directory = _enter(base, os.path.dirname(raw) or ".")
    return Path(directory) / os.path.basename(raw)


def lexists(path: PathLike) -> bool:
    """True if anything (including a dangling symlink) is at path"""
    return os.path.lexists(path)
