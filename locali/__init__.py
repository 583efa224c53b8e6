"""
locali - local environment bootstrapper

Provisions a machine by running recipes, supporting:
- Idempotent appends of labeled blocks to ~/.localrc and other rc files
- Symlink installation with numbered backups of whatever was in the way
- Cloning, downloading and extracting repositories under ~/.local/repo
- Recipes as ordered TOML steps or plain bash scripts
"""

__version__ = "0.1.0"

from .core import (
    LocalSettings,
    ensure_layout,
    resolve_real_dir,
    abspath,
)

from .domain.rcfile import (
    AppendResult,
    ConfigBlock,
    require_content,
    home_relpathed,
    localrc,
)

from .domain.link import (
    LinkOutcome,
    numbered,
    symlink,
)

from .domain.recipe import (
    Recipe,
    RecipeRunner,
)

__all__ = [
    # Version
    "__version__",
    # Settings and paths
    "LocalSettings",
    "ensure_layout",
    "resolve_real_dir",
    "abspath",
    # rc files
    "AppendResult",
    "ConfigBlock",
    "require_content",
    "home_relpathed",
    "localrc",
    # Links
    "LinkOutcome",
    "numbered",
    "symlink",
    # Recipes
    "Recipe",
    "RecipeRunner",
]
