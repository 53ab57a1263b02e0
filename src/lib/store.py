"""
Configuration storage for global ace_editor defaults.

Global defaults live in ace_editor.settings.yml:
  - editor defaults (theme, syntax, height, width, font_size, flags)
  - theme_list: theme key -> human-readable label
  - syntax_list: syntax key -> human-readable label

The packaged copy under assets/ is used unless AppSettings.settings_file
(or an explicit path) points elsewhere.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..config import appsettings
from .log import LOG

PACKAGED_SETTINGS_FILE = Path(__file__).parent.parent / "assets" / "ace_editor.settings.yml"

# Keys that hold catalogs rather than editor defaults
CATALOG_KEYS = ('theme_list', 'syntax_list')


class ConfigError(Exception):
    """Raised when the settings file is missing or cannot be parsed"""
    pass


class ConfigStore:
    """
    Read-only view over ace_editor.settings.yml.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Load the settings file.

        Args:
            path: Settings file to load. Defaults to AppSettings.settings_file,
                  then to the packaged defaults.

        Raises:
            ConfigError: If the file doesn't exist or isn't a YAML mapping
        """
        if path is None:
            path = appsettings.settings_file or PACKAGED_SETTINGS_FILE
        self.path = Path(path)

        if not self.path.exists():
            raise ConfigError(f"Settings file not found: {self.path}")

        self.config = self._config_load()
        LOG(f"Loaded settings from {self.path}", level=3)

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse the YAML settings file"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {self.path.name}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load {self.path.name}: {e}")

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ConfigError(f"{self.path.name} must contain a mapping at top level")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Supports nested keys with dot notation:
          store.get('theme_list.monokai')

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key doesn't exist
        """
        value: Any = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def defaults(self) -> Dict[str, Any]:
        """Editor defaults without the theme/syntax catalogs"""
        return {k: v for k, v in self.config.items() if k not in CATALOG_KEYS}

    def themes_list(self) -> Dict[str, str]:
        return dict(self.get('theme_list', {}) or {})

    def syntaxes_list(self) -> Dict[str, str]:
        return dict(self.get('syntax_list', {}) or {})

    def __repr__(self) -> str:
        return f"ConfigStore(path='{self.path}')"
