from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from files or the CLI into
strictly typed values, filling missing keys with domain defaults and
collecting human-readable warnings for every coercion.
"""

import logging
from typing import Any, Dict, List, Tuple

from sources_tree.domain.config import get_default_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Unknown keys are dropped with a warning so that typos in configuration
    files surface instead of being silently ignored.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises TypeError on type mismatch instead of coercing.

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

    merged: Dict[str, Any] = dict(defaults)
    for key, value in config.items():
        if key not in defaults:
            warnings.append(f"Unknown field '{key}' ignored.")
            continue
        merged[key] = value

    bool_fields = ["bundlers_as_exceptions", "sort_by_url", "trace_bundler_matches"]
    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["log_level"] = _as_level(merged.get("log_level"), defaults["log_level"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Normalize a logging level name."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return value.strip().upper()

    msg = f"Invalid field 'log_level': unsupported value {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
