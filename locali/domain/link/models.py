"""
Link domain models
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LinkOutcome(Enum):
    """
    Terminal state of a symlink install.

    - created: destination was free, link created
    - already_linked: destination already points at the source, nothing done
    - replaced: old destination moved to a backup, link created
    - declined: operator refused to replace the destination, nothing done
    - source_missing: source does not exist, nothing done
    """
    CREATED = "created"
    ALREADY_LINKED = "already_linked"
    REPLACED = "replaced"
    DECLINED = "declined"
    SOURCE_MISSING = "source_missing"

    @property
    def ok(self) -> bool:
        """Whether the destination now links to the source"""
        return self in (LinkOutcome.CREATED, LinkOutcome.ALREADY_LINKED, LinkOutcome.REPLACED)


@dataclass(frozen=True)
class LinkRecord:
    """A requested link: destination should resolve to source"""
    source: Path
    destination: Path
