"""
Backup path naming
"""
from pathlib import Path
from typing import Union

from ...core.paths import lexists


def numbered(path: Union[str, Path]) -> Path:
    """
    First free variant of a path.

    'file.bk' -> 'file.bk' if free, else 'file.bk.0', 'file.bk.1', ...

    The result is only guaranteed free until something else touches the
    directory; callers are expected to run alone.
    """
    path = Path(path)
    if not lexists(path):
        return path

    n = 0
    while True:
        candidate = path.with_name(f"{path.name}.{n}")
        if not lexists(candidate):
            return candidate
        n += 1
