from __future__ import annotations

"""
Configuration Domain Management.

Defines the default runtime settings, loads optional settings files
(YAML or JSON) and validates merged configuration dictionaries before
they reach the navigation services.
"""

import logging
from typing import Any, Dict, List, Tuple

import yaml

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ID_PREFIX = "next_page"
DEFAULT_SHARED_TRACK = "shared"

STRING_FIELDS: List[str] = [
    "navigation_path",
    "current_page",
    "id_prefix",
    "shared_track",
    "default_track",
    "url_prefix",
    "root_path",
]

# Fields where an explicit empty string is meaningful
_EMPTY_ALLOWED = {"current_page", "url_prefix", "root_path", "default_track"}


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Inputs
        "navigation_path": "",
        "current_page": "",

        # Next-page output
        "id_prefix": DEFAULT_ID_PREFIX,
        "shared_track": DEFAULT_SHARED_TRACK,
        "default_track": "",
        "url_prefix": "",

        # Page listing
        "root_path": "",
    }


def effective_default_track(config: Dict[str, Any]) -> str:
    """Return the track used for root-level pages (falls back to the shared track)."""
    return config.get("default_track") or config.get("shared_track") or DEFAULT_SHARED_TRACK


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load settings from a YAML or JSON file.

    Args:
        path: Settings file path.

    Returns:
        Dict[str, Any]: The decoded settings mapping.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a valid YAML/JSON mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file '{path}': {e}") from e

    if data is None:
        logger.warning(f"Settings file is empty: {path}")
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid settings file '{path}': expected a mapping, found {type(data).__name__}."
        )

    logger.debug(f"Loaded settings from: {path}")
    return data


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Fills missing keys with defaults and coerces untrusted values. Unknown
    keys are dropped with a warning.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise TypeError on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    for key in config:
        if key not in defaults:
            warnings.append(f"Unknown field '{key}' ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    return merged, warnings


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        if v or field in _EMPTY_ALLOWED:
            return v
        return fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
