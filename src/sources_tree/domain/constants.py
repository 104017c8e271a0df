from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed names and markers that drive sibling ordering in the
sources tree: the synthetic index entry label, bundler namespace markers,
browser-extension origin markers and the host prefix ignored by domain
equality.
"""

from typing import Tuple

APP_NAME = "sources-tree"
APP_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# NODE NAMES
# -----------------------------------------------------------------------------

# Label of the aggregated "index" entry (the page served at a bare origin)
INDEX_NAME = "(index)"

DIRECTORY_TYPE = "directory"
SOURCE_TYPE = "source"

# -----------------------------------------------------------------------------
# DOMAIN MATCHING
# -----------------------------------------------------------------------------

WWW_PREFIX = "www."

# -----------------------------------------------------------------------------
# BUNDLER AND EXTENSION MARKERS
# -----------------------------------------------------------------------------

ANGULAR_BUNDLER = "ng://"
WEBPACK_BUNDLER = "webpack://"

BROWSER_EXTENSION_MARKERS: Tuple[str, ...] = (
    "moz-extension:",
    "chrome-extension",
)
