"""
Symlink installation with numbered backups
"""
import os
import stat
from pathlib import Path
from typing import Union

from ...core.constants import BACKUP_SUFFIX
from ...core.interfaces import Notifier, PromptProvider
from ...core.logging import get_logger
from ...core.paths import abspath, lexists
from ...core.settings import LocalSettings
from .backup import numbered
from .models import LinkOutcome, LinkRecord

logger = get_logger(__name__)


def _same_target(source: Path, destination: Path) -> bool:
    """True if destination is a symlink resolving to the same file as source"""
    if not destination.is_symlink():
        return False
    try:
        src_stat = os.stat(source)
        dst_stat = os.stat(destination)
    except OSError:
        return False
    return (src_stat.st_dev, src_stat.st_ino) == (dst_stat.st_dev, dst_stat.st_ino)


def install_link(record: LinkRecord, prompt: PromptProvider, notifier: Notifier) -> LinkOutcome:
    """
    Make record.destination a symlink to record.source.

    1. destination already resolves to source -> ALREADY_LINKED
    2. source missing -> SOURCE_MISSING
    3. destination taken -> ask; no -> DECLINED, yes -> move it to
       numbered('<destination>.bk')
    4. create missing parent directories
    5. link to the absolute source -> CREATED or REPLACED

    A failure after the backup move leaves the backup in place and the
    destination absent.

    Raises:
        OSError: If moving the old destination or creating the link fails
    """
    source, destination = record.source, record.destination
    notifier.info(f"Create a symlink from '{source}' to '{destination}'")

    if _same_target(source, destination):
        notifier.info("Symlink already exists. skipped.")
        return LinkOutcome.ALREADY_LINKED

    if not os.path.exists(source):
        notifier.info(f"Source '{source}' doesn't exist. skipped.")
        return LinkOutcome.SOURCE_MISSING

    replaced = False
    if lexists(destination):
        if not prompt.confirm(f"Path '{destination}' already exists. Replace it?"):
            notifier.info(f"Keep '{destination}'.")
            return LinkOutcome.DECLINED

        backup = numbered(f"{destination}{BACKUP_SUFFIX}")
        notifier.info(f"Move '{destination}' to '{backup}'")
        destination.rename(backup)
        replaced = True
    else:
        destination.parent.mkdir(parents=True, exist_ok=True)

    target = abspath(source)
    os.symlink(target, abspath(destination))
    logger.debug(f"Linked {destination} -> {target}")
    return LinkOutcome.REPLACED if replaced else LinkOutcome.CREATED


def symlink(
    source: Union[str, Path],
    destination: Union[str, Path],
    prompt: PromptProvider,
    notifier: Notifier,
) -> LinkOutcome:
    """Create a symlink at destination pointing to source"""
    return install_link(LinkRecord(Path(source), Path(destination)), prompt, notifier)


def repo_bin(
    settings: LocalSettings,
    relpath: str,
    prompt: PromptProvider,
    notifier: Notifier,
) -> LinkOutcome:
    """Make a file under the repo dir executable and link it into the bin dir"""
    src = settings.local_repo / relpath
    dst = settings.local_bin / src.name
    if src.exists():
        notifier.info(f"Make '{src}' executable.")
        src.chmod(src.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return symlink(src, dst, prompt, notifier)


def repo_sym(
    settings: LocalSettings,
    relpath: str,
    destination: Union[str, Path],
    prompt: PromptProvider,
    notifier: Notifier,
) -> LinkOutcome:
    """Link a path under the repo dir to an arbitrary destination"""
    return symlink(settings.local_repo / relpath, Path(destination).expanduser(), prompt, notifier)
