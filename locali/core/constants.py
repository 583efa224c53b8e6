"""
Project constants definitions
"""

# ============================================================
# Local Layout
# ============================================================

DEFAULT_LOCAL_ROOT = "~/.local"
DEFAULT_REPO_DIRNAME = "repo"
DEFAULT_BIN_DIRNAME = "bin"
DEFAULT_LOCALRC = "~/.localrc"
DEFAULT_CONFIG_PATH = "~/.config/locali/config.toml"
DEFAULT_RECIPE_DIR = "~/.config/locali/recipes"

# ============================================================
# Config File Markers
# ============================================================

LABEL_PREFIX = "# "
HOME_PLACEHOLDER = "${HOME}"

# ============================================================
# Backups
# ============================================================

BACKUP_SUFFIX = ".bk"

# ============================================================
# Notifications
# ============================================================

INFO_PREFIX = "- "
NOTI_PREFIX = "* "
PROMPT_PREFIX = "? "
YES_NO_SUFFIX = " (y/n) "

# ============================================================
# Recipes
# ============================================================

RECIPE_TOML_SUFFIX = ".toml"
RECIPE_SHELL_SUFFIX = ".sh"
DEFAULT_SHELL = "bash"

# ============================================================
# Sudo Keep-alive
# ============================================================

SUDO_REFRESH_INTERVAL = 60
