"""Manages configuration for the fluentcheck command-line interface.

Settings are aggregated from default values, TOML files and environment
variables. The validation library itself never reads configuration; only the
CLI uses it to pick a default strategy and output format.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

logger = logging.getLogger(__name__)

# The default path for the user-specific global configuration file.
USER_CONFIG_PATH = Path.home() / ".config" / "fluentcheck" / "config.toml"
PROJECT_CONFIG_NAME = "fluentcheck.toml"

STRATEGIES = ("collect_all", "fail_fast")
OUTPUT_FORMATS = ("table", "json")


class Config:
    """Handles the configuration for the fluentcheck CLI.

    This class loads configuration from multiple sources with a defined
    precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `fluentcheck.toml` file.
    3.  User-level `~/.config/fluentcheck/config.toml` file.
    4.  A custom configuration file specified at runtime.
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): A dictionary containing the default
            configuration values.
    """

    DEFAULT_CONFIG = {
        "strategy": "collect_all",  # Can be "collect_all" or "fail_fast".
        "output": "table",  # Can be "table" or "json".
        "colors": True,
        "verbose": False,
    }

    ENV_MAPPING = {
        "FLUENTCHECK_STRATEGY": "strategy",
        "FLUENTCHECK_OUTPUT": "output",
        "FLUENTCHECK_COLORS": "colors",
        "FLUENTCHECK_VERBOSE": "verbose",
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the configuration manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                configuration file to load. If provided, it is loaded after
                the default file locations and overrides them.
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        """Loads configuration from files and environment variables."""
        self._load_default_configs()
        if config_path:
            self._load_file_config(Path(config_path))
        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads configs from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Recursively merges a new config dict into a base dict.

        Args:
            base (Dict[str, Any]): The base configuration dictionary.
            new (Dict[str, Any]): The new configuration to merge in.
        """
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges configuration from a TOML file.

        A file that cannot be read or parsed is skipped with a warning. The
        known top-level keys are validated like environment values; any other
        keys are merged as they are.

        Args:
            config_path (Path): The path to the TOML configuration file.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")
            return
        for key in tuple(self.DEFAULT_CONFIG):
            if key in file_config:
                self._set_checked(key, file_config.pop(key))
        self._merge_configs(self.config, file_config)

    def _load_env_config(self) -> None:
        """Loads and merges configuration from environment variables."""
        for env_var, config_key in self.ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_checked(config_key, value)

    def _set_checked(self, key: str, value: Any) -> None:
        """Validates a value for one of the known keys and stores it.

        Booleans accept a TOML boolean or the strings "true", "1", "yes" and
        "on". Strategy and output are matched case-insensitively against their
        known choices. Anything else is ignored with a warning.

        Args:
            key (str): The configuration key.
            value (Any): The raw value from a file or the environment.
        """
        if key in ("colors", "verbose"):
            if isinstance(value, str):
                value = value.strip().lower() in ("true", "1", "yes", "on")
            elif not isinstance(value, bool):
                logger.warning(f"Ignoring invalid value for {key}: {value!r} (expected a boolean)")
                return
            self.set(key, value)
            return

        choices = STRATEGIES if key == "strategy" else OUTPUT_FORMATS
        if isinstance(value, str):
            value = value.strip().lower()
        if value not in choices:
            logger.warning(f"Ignoring invalid value for {key}: {value!r} (expected one of {', '.join(choices)})")
            return
        self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value using a dot-separated key.

        Args:
            key (str): The dot-separated key (e.g., "strategy").
            default (Any): The default value to return if the key is not found.

        Returns:
            Any: The configuration value or the default.
        """
        keys = key.split('.')
        value = self.config
        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value in memory.

        Args:
            key (str): The dot-separated key.
            value (Any): The value to set.
        """
        keys = key.split('.')
        target_config = self.config
        for k in keys[:-1]:
            target_config = target_config.setdefault(k, {})
        target_config[keys[-1]] = value

    def is_fail_fast(self) -> bool:
        """Determines if sessions built by the CLI should stop at the first failure.

        Returns:
            bool: True if the configured strategy is "fail_fast".
        """
        return self.get("strategy") == "fail_fast"

    def wants_json(self) -> bool:
        """Determines if results should be printed as JSON.

        Returns:
            bool: True if the configured output format is "json".
        """
        return self.get("output") == "json"

    def __str__(self) -> str:
        """Returns a string representation of the configuration."""
        return f"Config({self.config})"
