from __future__ import annotations

"""
Ordering Configuration.

Holds the switches that alter sibling ordering and the defaults used when
no configuration file is supplied. Configuration files are plain JSON
objects; unreadable files fall back to defaults.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default configuration dictionary.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Ordering rules
        "bundlers_as_exceptions": False,
        "sort_by_url": False,

        # Diagnostics
        "trace_bundler_matches": False,
        "log_level": "INFO",
    }


@dataclass(frozen=True)
class OrderingConfig:
    """
    Immutable switches consumed by node matchers.

    Attributes:
        bundlers_as_exceptions: Pin "ng://" and "webpack://" groups to the
            early exception block instead of ordering them alphabetically.
        trace_bundler_matches: Emit a debug record whenever a bundler
            marker is recognized during a comparison.
    """
    bundlers_as_exceptions: bool = False
    trace_bundler_matches: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderingConfig":
        """Build the matcher switches from a (validated) config dictionary."""
        return cls(
            bundlers_as_exceptions=bool(data.get("bundlers_as_exceptions", False)),
            trace_bundler_matches=bool(data.get("trace_bundler_matches", False)),
        )


DEFAULT_ORDERING = OrderingConfig()

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a configuration file and merge it over the defaults.

    Args:
        path: JSON file to read. None returns the defaults.

    Returns:
        Dict[str, Any]: Merged configuration, or defaults on failure.
    """
    defaults = get_default_config()
    if not path:
        return defaults

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return defaults

    defaults.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return defaults
