"""
================================================================================
Configuration Loader
================================================================================

Loads config/config.yaml for the self-healing suite and hands out typed
values for its sections.

Features:
    - Schema check on load: the root and every known section must be
      mappings, `self_healing` values must have their documented types
    - Environment override of any dot path (ui.base_url <- UI_BASE_URL),
      coerced to the type of the file value or the caller's default
    - Typed accessors (get_int / get_bool / get_str) that name the
      offending key in ConfigurationError
    - UISettings snapshot of the `ui` section for browsers and pages

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.saucedemo.com"
DEFAULT_RESULTS_DIR = "test-results"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

SECTIONS = ("ui", "self_healing", "reporting", "logging")

# Expected value types below `self_healing`; nested dicts describe sub-sections
SELF_HEALING_SCHEMA: Dict[str, Any] = {
    "max_retries": int,
    "retry_delay_ms": int,
    "enable_logging": bool,
    "screenshot_on_failure": bool,
    "timeouts": {
        "primary": int,
        "fallback": int,
        "heuristic": int,
    },
}

_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")
_MISSING = object()


class ConfigurationError(Exception):
    """Raised when the configuration file or an override has the wrong shape."""
    pass


@dataclass(frozen=True)
class UISettings:
    """Resolved `ui.*` settings."""

    base_url: str = DEFAULT_BASE_URL
    browser: str = "chromium"
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}


def _type_name(expected: Any) -> str:
    return "mapping" if isinstance(expected, dict) else expected.__name__


def _matches(value: Any, expected: type) -> bool:
    # bool is an int subclass; `max_retries: true` is still a mistake
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def _check_schema(data: Dict[str, Any], schema: Dict[str, Any], prefix: str) -> None:
    for name, expected in schema.items():
        if name not in data or data[name] is None:
            continue
        value = data[name]
        key = f"{prefix}.{name}"
        if isinstance(expected, dict):
            if not isinstance(value, dict):
                raise ConfigurationError(f"'{key}' must be a mapping, got {type(value).__name__}")
            _check_schema(value, expected, key)
        elif not _matches(value, expected):
            raise ConfigurationError(
                f"'{key}' must be {_type_name(expected)}, got {type(value).__name__} ({value!r})"
            )


def validate_config(data: Any, source: Union[str, Path] = "<config>") -> Dict[str, Any]:
    """
    Check the shape of a parsed configuration document.

    Returns:
        The document itself ({} for an empty file)

    Raises:
        ConfigurationError: On a non-mapping root, a non-mapping section
            or a wrongly typed `self_healing` value
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{source}: top level must be a mapping of sections, got {type(data).__name__}"
        )

    for section in SECTIONS:
        value = data.get(section)
        if value is not None and not isinstance(value, dict):
            raise ConfigurationError(
                f"{source}: section '{section}' must be a mapping, got {type(value).__name__}"
            )

    _check_schema(data.get("self_healing") or {}, SELF_HEALING_SCHEMA, "self_healing")
    return data


class ConfigLoader:
    """
    Process-wide configuration for the self-healing suite.

    Precedence, highest first: environment variable, config.yaml, the
    default passed by the caller.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get_int("self_healing.max_retries", 3)
        3
        >>> config.ui_settings().browser
        'chromium'

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - self_healing.timeouts.primary -> SELF_HEALING_TIMEOUTS_PRIMARY
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Singleton - the file is parsed once per process (see `reset`)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._data: Dict[str, Any] = {}
        self._load()
        self._initialized = True

    def _load(self) -> None:
        if not self.config_path.exists():
            logger.warning(
                f"Configuration file not found: {self.config_path}. "
                f"Using defaults and environment variables only."
            )
            self._data = {}
            return

        try:
            raw = yaml.safe_load(self.config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        self._data = validate_config(raw, self.config_path)
        logger.debug(f"Loaded configuration from: {self.config_path}")

    def reload(self) -> None:
        """Re-read the file; the previous values stay if it is invalid."""
        self._load()
        logger.info(f"Configuration reloaded from: {self.config_path}")

    @classmethod
    def reset(cls) -> None:
        """Forget the singleton so the next ConfigLoader() reads the file again."""
        cls._instance = None

    # =========================================================================
    # Raw access
    # =========================================================================

    def _file_value(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return _MISSING
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value at a dot path.

        An environment override is coerced to the type of the file value,
        or of `default` when the file has none.
        """
        file_value = self._file_value(key)
        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            reference = default if file_value is _MISSING else file_value
            return self._coerce(key, env_value, reference)
        return default if file_value is _MISSING else file_value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Copy of a top-level section, {} when absent."""
        return dict(self._data.get(section) or {})

    # =========================================================================
    # Typed access
    # =========================================================================

    def get_int(self, key: str, default: int) -> int:
        value = self.get(key, default)
        if not _matches(value, int):
            raise ConfigurationError(f"'{key}' must be an integer, got {value!r}")
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.get(key, default)
        if not isinstance(value, bool):
            raise ConfigurationError(f"'{key}' must be true or false, got {value!r}")
        return value

    def get_str(self, key: str, default: str, choices: Optional[Iterable[str]] = None) -> str:
        value = self.get(key, default)
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"'{key}' must be a non-empty string, got {value!r}")
        if choices is not None and value not in choices:
            raise ConfigurationError(
                f"'{key}' must be one of {', '.join(choices)}, got {value!r}"
            )
        return value

    def ui_settings(self) -> UISettings:
        """Snapshot of the `ui` section with overrides applied."""
        defaults = UISettings()
        return UISettings(
            base_url=self.get_str("ui.base_url", defaults.base_url).rstrip("/"),
            browser=self.get_str("ui.browser", defaults.browser, choices=SUPPORTED_BROWSERS),
            headless=self.get_bool("ui.headless", defaults.headless),
            viewport_width=self.get_int("ui.viewport.width", defaults.viewport_width),
            viewport_height=self.get_int("ui.viewport.height", defaults.viewport_height),
        )

    def results_dir(self) -> Path:
        """Directory for screenshots and healing reports."""
        return Path(self.get_str("reporting.results_dir", DEFAULT_RESULTS_DIR))

    @staticmethod
    def _coerce(key: str, raw: str, reference: Any) -> Any:
        """Turn an environment string into the type of `reference`."""
        if reference is None or isinstance(reference, str):
            return raw

        text = raw.strip()
        if isinstance(reference, bool):
            lowered = text.lower()
            if lowered in _TRUE_WORDS:
                return True
            if lowered in _FALSE_WORDS:
                return False
            raise ConfigurationError(f"{key.upper().replace('.', '_')}={raw!r} is not a boolean")

        converter = int if isinstance(reference, int) else float if isinstance(reference, float) else None
        if converter is None:
            raise ConfigurationError(f"'{key}' cannot be overridden from the environment")
        try:
            return converter(text)
        except ValueError as e:
            raise ConfigurationError(
                f"{key.upper().replace('.', '_')}={raw!r} is not a valid {converter.__name__}"
            ) from e


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "validate_config",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_BASE_URL",
    "SUPPORTED_BROWSERS",
]
