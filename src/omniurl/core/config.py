"""Configuration loader for omniurl.

This module loads the YAML settings file that controls the default
scheme, the PDF viewer extension id and the extension/origin tables used
by the transforms.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from omniurl.core.constants import DEFAULTS
from omniurl.core.exceptions import ConfigError
from omniurl.core.models import UrlUtilConfig


CONFIG_ENV_VAR = "OMNIURL_CONFIG"


# ============================================================================
# Configuration Paths
# ============================================================================

def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to configs directory (./configs relative to project root)
    """
    # core/ -> omniurl/ -> src/ -> root
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / "configs"


def resolve_config_path(config_file: Path | str | None = None) -> Path | None:
    """Pick the settings file to load.

    Order: explicit path, ``OMNIURL_CONFIG``, ``configs/omniurl.yaml``.

    Returns:
        Path to load, or None when only the built-in defaults apply
    """
    if config_file is not None:
        return Path(config_file)

    env_path = (os.getenv(CONFIG_ENV_VAR) or "").strip()
    if env_path:
        return Path(os.path.expandvars(os.path.expanduser(env_path)))

    default_path = get_config_dir() / "omniurl.yaml"
    return default_path if default_path.exists() else None


# ============================================================================
# Settings Loader
# ============================================================================

def _string_list(section: dict[str, Any], key: str) -> tuple[str, ...]:
    value = section.get(key, DEFAULTS[key])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def _string(section: dict[str, Any], key: str) -> str:
    value = section.get(key, DEFAULTS[key])
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value.strip()


def load_config(config_file: Path | str | None = None) -> UrlUtilConfig:
    """Load omniurl settings from YAML.

    Args:
        config_file: Path to a YAML file. If None, falls back to the
            environment variable, then the project config, then defaults

    Returns:
        UrlUtilConfig with validated settings

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = resolve_config_path(config_file)
    if config_path is None:
        return UrlUtilConfig()

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}") from e

    if not data:
        return UrlUtilConfig()

    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping")

    section = data.get("urlutil", {})
    if not isinstance(section, dict):
        raise ConfigError("'urlutil' section must be a mapping")

    unknown = set(section) - set(DEFAULTS)
    if unknown:
        raise ConfigError(f"Unknown urlutil settings: {', '.join(sorted(unknown))}")

    default_scheme = _string(section, "default_scheme")
    if not default_scheme.endswith(":") and not default_scheme.endswith("://"):
        raise ConfigError(f"'default_scheme' must end with ':' or '://', got {default_scheme!r}")

    return UrlUtilConfig(
        default_scheme=default_scheme,
        pdfjs_extension_id=_string(section, "pdfjs_extension_id"),
        image_extensions=_string_list(section, "image_extensions"),
        local_file_origins=_string_list(section, "local_file_origins"),
    )
