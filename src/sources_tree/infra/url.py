from __future__ import annotations

"""
URL Parsing Collaborators.

Thin, non-raising wrappers around `urllib.parse` that expose only what the
ordering rules need: the host component of a URL and the detection of
browser-extension origins.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlsplit

from sources_tree.domain.constants import BROWSER_EXTENSION_MARKERS

logger = logging.getLogger(__name__)

# Ports omitted from the host, as a browser would report it
_DEFAULT_PORTS: Dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}


@dataclass(frozen=True)
class ParsedUrl:
    """
    Subset of URL components consumed by the sources tree.

    Attributes:
        scheme: Lower-cased scheme, empty when absent.
        host: Host name including a non-default port, or None.
        path: Path component, empty when absent.
    """
    scheme: str = ""
    host: Optional[str] = None
    path: str = ""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_url(url: str) -> ParsedUrl:
    """
    Split a URL into the components used for grouping.

    Never raises: unparsable input yields a ParsedUrl without host.

    Args:
        url: Full URL string.

    Returns:
        ParsedUrl: Parsed components.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        port = parts.port
    except ValueError as e:
        logger.debug(f"Unparsable URL '{url}': {e}")
        return ParsedUrl()

    if not hostname:
        return ParsedUrl(scheme=parts.scheme, path=parts.path)

    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and _DEFAULT_PORTS.get(parts.scheme.lower()) != port:
        host = f"{host}:{port}"
    return ParsedUrl(scheme=parts.scheme, host=host, path=parts.path)


def is_url_extension(url: str) -> bool:
    """
    Check whether a URL or group name belongs to a browser extension.

    Args:
        url: URL or node name to inspect.

    Returns:
        bool: True for moz-extension / chrome-extension origins.
    """
    return any(marker in url for marker in BROWSER_EXTENSION_MARKERS)
