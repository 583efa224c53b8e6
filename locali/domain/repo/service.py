"""
Repository acquisition under the local repo dir
"""
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from ...core.exceptions import RepoError
from ...core.interfaces import Notifier
from ...core.logging import get_logger
from ...core.settings import LocalSettings
from .fetch import download, extract

logger = get_logger(__name__)


def repo_name_from_url(url: str) -> str:
    """'https://host/user/tool.git' -> 'tool'"""
    name = url.rstrip("/").rsplit("/", 1)[-1]
    if name.endswith(".git"):
        name = name[:-len(".git")]
    return name


def _run(cmd: List[str], settings: LocalSettings) -> int:
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        return subprocess.run(cmd, env=settings.environ()).returncode
    except OSError as e:
        raise RepoError(f"Cannot run {cmd[0]}: {e}") from e


def repo_git(
    settings: LocalSettings,
    url: str,
    notifier: Notifier,
    name: Optional[str] = None,
) -> Path:
    """
    Clone a git repository into the repo dir, or pull it if already there.

    Raises:
        RepoError: If git exits non-zero
    """
    target = settings.local_repo / (name or repo_name_from_url(url))

    if target.is_dir():
        notifier.info(f"Pull '{target}'")
        code = _run(["git", "-C", str(target), "pull"], settings)
    else:
        target.parent.mkdir(parents=True, exist_ok=True)
        notifier.info(f"Clone '{url}'")
        code = _run(["git", "clone", url, str(target)], settings)

    if code != 0:
        raise RepoError(f"git failed for {url} (exit code: {code})")
    return target


def repo_zip(settings: LocalSettings, url: str, name: str, notifier: Notifier) -> Path:
    """Download an archive and extract it as <repo dir>/<name>"""
    target = settings.local_repo / name
    with tempfile.TemporaryDirectory(prefix="locali-") as tmp:
        archive = Path(tmp) / repo_name_from_url(url)
        download(url, archive, notifier)
        extract(archive, target, notifier)
    return target


def repo_get(settings: LocalSettings, url: str, name: str, notifier: Notifier) -> Path:
    """Download a single file into <repo dir>/<name>/"""
    target = settings.local_repo / name / repo_name_from_url(url)
    return download(url, target, notifier)


def repo_run(
    settings: LocalSettings,
    relpath: str,
    notifier: Notifier,
    args: Optional[List[str]] = None,
) -> None:
    """
    Run a command under the repo dir.

    Raises:
        RepoError: If the command is missing or exits non-zero
    """
    run = settings.local_repo / relpath
    notifier.info(f"Run '{run}'")
    code = _run([str(run), *(args or [])], settings)
    if code != 0:
        raise RepoError(f"Command failed: {run} (exit code: {code})")
