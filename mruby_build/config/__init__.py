"""
Configuration management for the build configurator
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from ..directive import BUILD_TYPE_VAR


CONFIG_ENV_VAR = "MRUBY_BUILD_CONFIG"
DEFAULT_CONFIG_FILE = "mruby_build.yaml"
SUPPORTED_FORMATS = ("ruby", "json", "yaml")

DEFAULTS: Dict[str, Any] = {
    "build_type_variable": BUILD_TYPE_VAR,
    "format": "ruby",
    "output": None,
    "build_name": "host",
    "log_file": None,
    "verbose": False,
}

# Value types of the free-form options, None means "use the default"
OPTION_TYPES = {
    "build_type_variable": str,
    "build_name": str,
    "output": str,
    "log_file": str,
    "verbose": bool,
}


class ConfigLoader:
    """Loads and manages configurator settings"""

    def __init__(self, config_file: Optional[Path] = None,
                 env: Optional[Dict[str, str]] = None):
        """
        Initialize configuration loader

        Without an explicit file, MRUBY_BUILD_CONFIG is consulted and then
        mruby_build.yaml in the working directory. A missing default file
        is not an error.

        Args:
            config_file: Explicit YAML settings file
            env: Environment mapping (defaults to os.environ)
        """
        env = os.environ if env is None else env
        self.options = dict(DEFAULTS)
        self.config_file = None

        if config_file is None and env.get(CONFIG_ENV_VAR):
            config_file = Path(env[CONFIG_ENV_VAR])

        if config_file is not None:
            config_file = Path(config_file)
            if not config_file.exists():
                raise FileNotFoundError(f"Config file not found: {config_file}")
        else:
            config_file = Path.cwd() / DEFAULT_CONFIG_FILE
            if not config_file.exists():
                return

        self.config_file = config_file
        self.options.update(self._load(config_file))

    def _load(self, config_file: Path) -> Dict[str, Any]:
        """Read and validate a settings file"""
        with open(config_file, 'r', encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")

        unknown = sorted(set(data) - set(DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown config options in {config_file}: "
                             f"{', '.join(map(str, unknown))}")

        for key, expected in OPTION_TYPES.items():
            value = data.get(key)
            if value is not None and not isinstance(value, expected):
                raise ValueError(f"Config option {key} must be of type "
                                 f"{expected.__name__}, got {type(value).__name__}: {config_file}")

        fmt = data.get("format")
        if fmt is not None and fmt not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported format: {fmt}. "
                             f"Supported: {', '.join(SUPPORTED_FORMATS)}")

        return data

    def get_option(self, key: str, default: Any = None) -> Any:
        """
        Get a configurator option

        Args:
            key: Option key
            default: Default value if not set

        Returns:
            Option value
        """
        value = self.options.get(key)
        return default if value is None else value

    def get_all_configs(self) -> Dict[str, Any]:
        """Get all configuration data"""
        return dict(self.options)


__all__ = ["ConfigLoader", "CONFIG_ENV_VAR", "DEFAULT_CONFIG_FILE", "SUPPORTED_FORMATS"]
