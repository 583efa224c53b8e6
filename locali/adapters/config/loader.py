"""
Configuration loader with priority: CLI > env > TOML > defaults
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import DEFAULT_CONFIG_PATH
from ...core.exceptions import ConfigError
from ...core.settings import LocalSettings


class ConfigLoader:
    """Configuration loader with priority support"""
    
    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = os.environ if environ is None else environ
        self._env_mappings = {
            "LOCALI_HOME": "home",
            "LOCALI_ROOT": "local_root",
            "LOCALI_REPO": "local_repo",
            "LOCALI_BIN": "local_bin",
            "LOCALI_RC": "localrc",
            "LOCALI_RECIPES": "recipe_dirs",
        }
    
    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        
        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse TOML configuration: {e}") from e
    
    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}
        
        for env_key, config_key in self._env_mappings.items():
            value = self._environ.get(env_key)
            if not value:
                continue
            if config_key == "recipe_dirs":
                config[config_key] = [d for d in value.split(os.pathsep) if d]
            else:
                config[config_key] = value
        
        return config
    
    def merge_configs(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configurations with priority.
        Later configs override earlier ones.
        """
        result: Dict[str, Any] = {}
        
        for config in configs:
            result = self._deep_merge(result, config)
        
        return result
    
    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()
        
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        
        return result
    
    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Dict[str, Any]:
        """
        Load configuration with priority: CLI > env > TOML
        
        Args:
            toml_path: Path to TOML configuration file. When omitted the
                default location is read if it exists.
            cli_overrides: CLI parameter overrides
            use_env: Whether to load from environment variables
        
        Returns:
            Merged configuration dictionary
        """
        configs = []
        
        if toml_path:
            configs.append(self.load_toml(Path(toml_path).expanduser()))
        else:
            default_path = Path(DEFAULT_CONFIG_PATH).expanduser()
            if default_path.exists():
                configs.append(self.load_toml(default_path))
        
        if use_env:
            env_config = self.load_env()
            if env_config:
                configs.append(env_config)
        
        if cli_overrides:
            configs.append({k: v for k, v in cli_overrides.items() if v is not None})
        
        return self.merge_configs(*configs)
    
    def load_settings(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> LocalSettings:
        """Load configuration and build LocalSettings from it"""
        return LocalSettings.from_config(self.load(toml_path, cli_overrides))
