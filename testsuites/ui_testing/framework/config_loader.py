"""
================================================================================
Configuration Loader
================================================================================

YAML-based UI test configuration with environment variable override support.

Features:
    - YAML configuration loading (config/ui_config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Per-environment credential metadata (UI_ENV selects the environment)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "ui_config.yaml"

DEFAULT_ENVIRONMENT = "default"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


@dataclass(frozen=True)
class Credentials:
    """Login credentials for the application under test."""
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Read-only configuration for one execution environment.

    Attributes:
        name: Environment name (e.g. "default", "staging")
        base_url: Storefront base URL (index.php entry point)
        credentials: Application account used by the session fixture
        http_credentials: Optional HTTP basic auth for the whole site
    """
    name: str
    base_url: str
    credentials: Credentials
    http_credentials: Optional[Credentials] = None


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("browser.headless", True)
        True
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton pattern - configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses UI_CONFIG_PATH or DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get("UI_CONFIG_PATH")
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "browser.headless")
            default: Default value if key not found
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section, or an empty dict."""
        return self._config.get(section, {}) or {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """Convert an environment string to match the default's type."""
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


def apply_selection_defaults(environ: Optional[Dict[str, str]] = None) -> None:
    """
    Default UI_ENV and UI_CONFIG_PATH when the caller left them unset.

    Must run before the first ConfigLoader() is built; the singleton reads
    UI_CONFIG_PATH only once.
    """
    environ = os.environ if environ is None else environ
    environ.setdefault("UI_ENV", DEFAULT_ENVIRONMENT)
    environ.setdefault("UI_CONFIG_PATH", str(DEFAULT_CONFIG_PATH))


def load_environment(
    name: Optional[str] = None,
    loader: Optional[ConfigLoader] = None,
) -> EnvironmentConfig:
    """
    Build the EnvironmentConfig for the selected environment.

    Selection order: explicit ``name`` -> ``UI_ENV`` -> "default".
    ``UI_BASE_URL``, ``UI_USERNAME`` and ``UI_PASSWORD`` override the file.

    Raises:
        ConfigurationError: Unknown environment or missing base URL/credentials
    """
    loader = loader or ConfigLoader()
    name = name or os.environ.get("UI_ENV") or DEFAULT_ENVIRONMENT

    environments = loader.get_section("environments")
    if environments and name not in environments:
        raise ConfigurationError(
            f"Unknown environment '{name}'. Available: {', '.join(sorted(environments))}"
        )
    section = environments.get(name, {}) or {}

    base_url = os.environ.get("UI_BASE_URL") or section.get("base_url")
    username = os.environ.get("UI_USERNAME") or section.get("username")
    password = os.environ.get("UI_PASSWORD") or section.get("password")

    if not base_url:
        raise ConfigurationError(f"No base_url configured for environment '{name}'")
    if not username or not password:
        raise ConfigurationError(f"No credentials configured for environment '{name}'")

    http_auth = section.get("http_credentials") or {}
    http_credentials = None
    if http_auth.get("username"):
        http_credentials = Credentials(http_auth["username"], http_auth.get("password", ""))

    environment = EnvironmentConfig(
        name=name,
        base_url=str(base_url).rstrip("/"),
        credentials=Credentials(str(username), str(password)),
        http_credentials=http_credentials,
    )
    logger.debug(f"Using environment '{name}': {environment.base_url}")
    return environment


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "Credentials",
    "EnvironmentConfig",
    "apply_selection_defaults",
    "load_environment",
    "DEFAULT_CONFIG_PATH",
]
