"""
Unified exception definitions
"""


class LocaliError(Exception):
    """Base exception class"""
    pass


class ConfigError(LocaliError):
    """Configuration error"""
    pass


class NotFoundError(LocaliError, FileNotFoundError):
    """A required file does not exist"""
    pass


class PathResolveError(LocaliError, OSError):
    """Path could not be traversed or resolved"""
    pass


class RepoError(LocaliError):
    """Repository acquisition error"""
    pass


class DownloadError(RepoError):
    """Download error"""
    pass


class ExtractError(RepoError):
    """Archive extraction error"""
    pass


class RecipeError(LocaliError):
    """Recipe definition or execution error"""
    pass


class RecipeNotFoundError(RecipeError):
    """Recipe name not found in any recipe directory"""
    pass
