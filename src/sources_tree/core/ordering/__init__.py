from __future__ import annotations

from .host import get_domain, is_exact_domain_match
from .matcher import (
    MatchContext,
    compare_node,
    compare_nodes,
    create_tree_node_matcher,
    match_with_exception,
    sort_nodes,
)
from .search import find_node_in_contents, locate

__all__ = [
    "MatchContext",
    "compare_node",
    "compare_nodes",
    "create_tree_node_matcher",
    "find_node_in_contents",
    "get_domain",
    "is_exact_domain_match",
    "locate",
    "match_with_exception",
    "sort_nodes",
]
