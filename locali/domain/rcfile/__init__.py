"""
rc file domain module
"""
from .models import AppendResult, ConfigBlock
from .writer import contains_content, require_content, require_file, home_relpathed, localrc

__all__ = [
    "AppendResult",
    "ConfigBlock",
    "contains_content",
    "require_content",
    "require_file",
    "home_relpathed",
    "localrc",
]
