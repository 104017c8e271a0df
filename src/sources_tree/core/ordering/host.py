from __future__ import annotations

"""
Host Normalization.

Derives the comparable domain of a URL and implements the single domain
equality rule shared by node identity and debuggee-host detection.
"""

from typing import Optional

from sources_tree.domain.constants import WWW_PREFIX
from sources_tree.infra.url import parse_url

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_domain(url: Optional[str] = None) -> Optional[str]:
    """
    Extract the domain of a URL, dropping a leading "www." label.

    Typically called once per tree build to compute the debuggee host.

    Args:
        url: Full URL, or None.

    Returns:
        Optional[str]: The host without "www.", or None when the URL is
                       absent or carries no host.
    """
    if not url:
        return None
    host = parse_url(url).host
    if not host:
        return None
    return strip_www(host)


def strip_www(name: str) -> str:
    """Remove a single leading "www." from `name`."""
    return name[len(WWW_PREFIX):] if name.startswith(WWW_PREFIX) else name


def is_exact_domain_match(part: str, other: str) -> bool:
    """
    Compare two names as domains.

    Each side is stripped of a leading "www." independently, so
    "www.example.com" matches "example.com" in both directions.

    Args:
        part: First name.
        other: Second name.

    Returns:
        bool: True if the remainders are identical.
    """
    return strip_www(part) == strip_www(other)
