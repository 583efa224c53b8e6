"""
Local layout settings
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional

from .constants import (
    DEFAULT_LOCAL_ROOT,
    DEFAULT_REPO_DIRNAME,
    DEFAULT_BIN_DIRNAME,
    DEFAULT_LOCALRC,
    DEFAULT_RECIPE_DIR,
)
from .exceptions import ConfigError


def _resolve(path: str, home: Path, base: Optional[Path] = None) -> Path:
    """Expand ~ against home and anchor relative paths at base (or home)"""
    if path == "~" or path.startswith("~/"):
        return home / path[2:]
    p = Path(path)
    if p.is_absolute():
        return p
    return (base or home) / p


@dataclass
class LocalSettings:
    """
    Directories and files every operation works against.

    Built once per process and passed to each component explicitly.
    """
    home: Path
    local_root: Path
    local_repo: Path
    local_bin: Path
    localrc: Path
    recipe_dirs: List[Path] = field(default_factory=list)

    @classmethod
    def from_config(cls, cfg: Dict[str, Any], home: Optional[Path] = None) -> "LocalSettings":
        """
        Build settings from a merged configuration dictionary.

        Recognised keys: home, local_root, local_repo, local_bin, localrc,
        recipe_dirs. Missing keys fall back to the ~/.local layout.
        """
        home = Path(cfg.get("home") or home or Path.home()).expanduser()

        local_root = _resolve(cfg.get("local_root", DEFAULT_LOCAL_ROOT), home)
        local_repo = _resolve(cfg.get("local_repo", DEFAULT_REPO_DIRNAME), home, local_root)
        local_bin = _resolve(cfg.get("local_bin", DEFAULT_BIN_DIRNAME), home, local_root)
        localrc = _resolve(cfg.get("localrc", DEFAULT_LOCALRC), home)

        recipe_dirs = cfg.get("recipe_dirs", [DEFAULT_RECIPE_DIR])
        if isinstance(recipe_dirs, str):
            recipe_dirs = [d for d in recipe_dirs.split(os.pathsep) if d]
        if not isinstance(recipe_dirs, list):
            raise ConfigError(f"recipe_dirs must be a list of paths, got: {recipe_dirs!r}")

        return cls(
            home=home,
            local_root=local_root,
            local_repo=local_repo,
            local_bin=local_bin,
            localrc=localrc,
            recipe_dirs=[_resolve(str(d), home) for d in recipe_dirs],
        )

    def environ(self) -> Dict[str, str]:
        """Environment variables exported to external commands"""
        env = os.environ.copy()
        env.update({
            "LOCAL_ROOT": str(self.local_root),
            "LOCAL_REPO": str(self.local_repo),
            "LOCAL_BIN": str(self.local_bin),
            "LOCALRC": str(self.localrc),
        })
        env["PATH"] = path_with_local_bin(self, env.get("PATH", ""))
        return env


def ensure_layout(settings: LocalSettings) -> None:
    """Create the local directories and the rc file if missing"""
    settings.local_root.mkdir(parents=True, exist_ok=True)
    settings.local_repo.mkdir(parents=True, exist_ok=True)
    settings.local_bin.mkdir(parents=True, exist_ok=True)
    settings.localrc.parent.mkdir(parents=True, exist_ok=True)
    settings.localrc.touch(exist_ok=True)


def path_with_local_bin(settings: LocalSettings, path_env: str) -> str:
    """Prepend local_bin to a PATH value unless it is already a component"""
    local_bin = str(settings.local_bin)
    if local_bin in path_env.split(os.pathsep):
        return path_env
    if not path_env:
        return local_bin
    return f"{local_bin}{os.pathsep}{path_env}"
