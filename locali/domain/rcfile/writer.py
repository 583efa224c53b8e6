"""
Idempotent rc file writer
"""
from pathlib import Path
from typing import Union

from ...core.constants import HOME_PLACEHOLDER
from ...core.exceptions import NotFoundError
from ...core.interfaces import Notifier
from ...core.logging import get_logger
from ...core.settings import LocalSettings
from .models import AppendResult, ConfigBlock

logger = get_logger(__name__)


def contains_content(text: str, content: str) -> bool:
    """
    Presence test used by require_content.

    Literal substring match, whitespace sensitive.
    """
    return content in text


def require_content(
    target_path: Union[str, Path],
    content: str,
    notifier: Notifier,
) -> AppendResult:
    """
    Append content to a file unless it is already there.

    Args:
        target_path: Existing file to append to
        content: Exact text that must be present in the file
        notifier: Progress notifications

    Returns:
        AppendResult.APPENDED or AppendResult.SKIPPED

    Raises:
        NotFoundError: If the target file does not exist
        OSError: If reading or writing fails
    """
    path = Path(target_path)
    if not path.is_file():
        raise NotFoundError(f"File not found: {path}")

    text = path.read_text(encoding="utf-8", errors="surrogateescape")
    if contains_content(text, content):
        notifier.info(f"Content already in '{path}'. skipped.")
        return AppendResult.SKIPPED

    notifier.info(f"Append to '{path}'")
    with path.open("a", encoding="utf-8", errors="surrogateescape") as f:
        f.write(f"{content}\n\n")
    logger.debug(f"Appended {len(content)} chars to {path}")
    return AppendResult.APPENDED


def require_file(
    target_path: Union[str, Path],
    content: str,
    notifier: Notifier,
) -> None:
    """Write content to a file, replacing whatever was there"""
    path = Path(target_path)
    notifier.info(f"Write to '{path}'")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{content}\n", encoding="utf-8")


def home_relpathed(text: str, settings: LocalSettings) -> str:
    """
    Replace the absolute local root with a ${HOME}-relative form.

    '/home/me/.local/bin' -> '${HOME}/.local/bin'
    """
    if not settings.local_root.is_relative_to(settings.home):
        return text
    local_root = str(settings.local_root)
    relpath = local_root[len(str(settings.home)):]
    return text.replace(local_root, f"{HOME_PLACEHOLDER}{relpath}")


def localrc(
    settings: LocalSettings,
    label: str,
    body: str,
    notifier: Notifier,
) -> AppendResult:
    """Append a labeled block to the local rc file unless already present"""
    block = ConfigBlock(label=label, body=home_relpathed(body, settings))
    return require_content(settings.localrc, block.render(), notifier)
