"""
Download and extraction
"""
import subprocess
import tarfile
import zipfile
from pathlib import Path
from typing import Union

from ...core.exceptions import DownloadError, ExtractError
from ...core.interfaces import Notifier
from ...core.logging import get_logger
from .system import command_exists

logger = get_logger(__name__)

# suffix -> tarfile mode
TAR_MODES = {
    ".tar.bz2": "r:bz2",
    ".tar.gz": "r:gz",
    ".tgz": "r:gz",
    ".tar": "r:",
}
ZIP_SUFFIXES = (".zip", ".ZIP")


def download(url: str, path: Union[str, Path], notifier: Notifier) -> Path:
    """
    Download url into path with wget or curl, whichever is installed.

    Raises:
        DownloadError: If neither tool exists or the download fails
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    notifier.info(f"Download '{url}' into '{path}'")
    if command_exists("wget"):
        cmd = ["wget", "-qO", str(path), url]
    elif command_exists("curl"):
        cmd = ["curl", "-LsSo", str(path), url]
    else:
        notifier.info("Unable to use 'wget' or 'curl'.")
        raise DownloadError("Neither 'wget' nor 'curl' is available")

    logger.debug(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.returncode != 0:
        raise DownloadError(
            f"Failed to download {url} (exit code: {result.returncode})\n{result.stderr}"
        )
    return path


def _tar_mode(name: str):
    for suffix, mode in TAR_MODES.items():
        if name.endswith(suffix):
            return mode
    return None


def extract(path: Union[str, Path], target_dir: Union[str, Path], notifier: Notifier) -> Path:
    """
    Extract a tar or zip archive into target_dir.

    Raises:
        ExtractError: If the file is missing or its format is unsupported
    """
    path = Path(path)
    target_dir = Path(target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    notifier.info(f"Extract '{path}' into '{target_dir}'")
    if not path.is_file():
        notifier.info(f"File '{path}' doesn't exist.")
        raise ExtractError(f"File not found: {path}")

    mode = _tar_mode(path.name)
    try:
        if mode is not None:
            with tarfile.open(path, mode) as archive:
                archive.extractall(target_dir, filter="data")
        elif path.name.endswith(ZIP_SUFFIXES):
            with zipfile.ZipFile(path) as archive:
                archive.extractall(target_dir)
        else:
            notifier.info(f"Unable to extract '{path}'")
            raise ExtractError(f"Unsupported archive format: {path.name}")
    except (tarfile.TarError, zipfile.BadZipFile) as e:
        raise ExtractError(f"Failed to extract {path}: {e}") from e

    return target_dir
