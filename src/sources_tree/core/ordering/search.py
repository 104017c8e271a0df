from __future__ import annotations

"""
Ordered Contents Search.

Binary search over the ordered children of a directory node, driven by a
node matcher. Reports either the position of the matching child or the
position where the searched key has to be inserted to keep the order.
"""

from typing import Optional

from sources_tree.core.ordering.matcher import create_tree_node_matcher
from sources_tree.domain.config import OrderingConfig
from sources_tree.domain.tree_models import (
    FindNodeInContentsMatcher,
    SearchResult,
    Source,
    TreeNode,
    is_source,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find_node_in_contents(tree: TreeNode, matcher: FindNodeInContentsMatcher) -> SearchResult:
    """
    Locate a key among the children of `tree`.

    Children are read in place and assumed to be ordered consistently with
    `matcher`; on unordered input the result is unspecified but the call
    still terminates without error. Source nodes and empty directories
    return (False, 0) without calling the matcher.

    Args:
        tree: Directory node whose children are searched.
        matcher: Comparator built for the searched key.

    Returns:
        SearchResult: (True, index) of the match, or (False, insertion point).
    """
    if is_source(tree) or len(tree.contents) == 0:
        return SearchResult(found=False, index=0)

    children = tree.contents
    left = 0
    right = len(children) - 1
    while left < right:
        middle = (left + right) // 2
        if matcher(children[middle]) < 0:
            left = middle + 1
        else:
            right = middle

    result = matcher(children[left])
    if result == 0:
        return SearchResult(found=True, index=left)
    return SearchResult(found=False, index=left if result > 0 else left + 1)


def locate(
        tree: TreeNode,
        part: str,
        is_dir: bool,
        debuggee_host: Optional[str] = None,
        source: Optional[Source] = None,
        sort_by_url: bool = False,
        config: Optional[OrderingConfig] = None,
) -> SearchResult:
    """Build the matcher for `part` and search the children of `tree` with it."""
    matcher = create_tree_node_matcher(part, is_dir, debuggee_host, source, sort_by_url, config)
    return find_node_in_contents(tree, matcher)
