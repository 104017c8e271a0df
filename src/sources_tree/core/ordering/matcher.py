from __future__ import annotations

"""
Sibling Ordering Rules.

Builds the three-way comparators that define the display order of nodes
sharing a parent. Ordering precedence, first rule wins:

1. Identity: names equal under the domain rule (leading "www." ignored).
2. Pinned node: the candidate node is an exception and sorts first.
3. Pinned target: the searched name is an exception and sorts first.
4. Directories before sources.
5. Optional URL tie-break between sources.
6. Locale-style comparison of names.
"""

import functools
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from sources_tree.core.ordering.collation import locale_compare
from sources_tree.core.ordering.host import is_exact_domain_match
from sources_tree.domain.config import DEFAULT_ORDERING, OrderingConfig
from sources_tree.domain.constants import ANGULAR_BUNDLER, INDEX_NAME, WEBPACK_BUNDLER
from sources_tree.domain.tree_models import (
    FindNodeInContentsMatcher,
    Source,
    TreeNode,
    is_source,
    node_has_children,
)
from sources_tree.infra.url import is_url_extension

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# EXCEPTION RULES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ExceptionRule:
    """
    A named predicate marking node names pinned ahead of regular siblings.

    Attributes:
        name: Identifier used in diagnostics.
        predicate: Receives the node name and the debuggee host.
        bundler: Bundler rules only pin when the configuration enables it.
    """
    name: str
    predicate: Callable[[str, Optional[str]], bool]
    bundler: bool = False


def _is_index(name: str, debuggee_host: Optional[str]) -> bool:
    # The page served at the bare origin
    return name == INDEX_NAME


def _is_debuggee_host(name: str, debuggee_host: Optional[str]) -> bool:
    # The inspected page's own origin group
    return bool(debuggee_host) and is_exact_domain_match(name, debuggee_host)


def _is_angular_bundler(name: str, debuggee_host: Optional[str]) -> bool:
    return name == ANGULAR_BUNDLER


def _is_webpack_bundler(name: str, debuggee_host: Optional[str]) -> bool:
    return name == WEBPACK_BUNDLER


def _is_extension_origin(name: str, debuggee_host: Optional[str]) -> bool:
    # moz-extension / chrome-extension groups
    return is_url_extension(name)


EXCEPTION_RULES: Tuple[ExceptionRule, ...] = (
    ExceptionRule("index", _is_index),
    ExceptionRule("debuggee-host", _is_debuggee_host),
    ExceptionRule("angular-bundler", _is_angular_bundler, bundler=True),
    ExceptionRule("webpack-bundler", _is_webpack_bundler, bundler=True),
    ExceptionRule("url-extension", _is_extension_origin),
)


def match_with_exception(
        name: str,
        debuggee_host: Optional[str],
        config: OrderingConfig = DEFAULT_ORDERING,
) -> bool:
    """
    Check whether `name` belongs to the pinned exception block.

    Bundler markers are always recognized, but they only pin the node when
    `config.bundlers_as_exceptions` is set; otherwise they order like any
    other name.

    Args:
        name: Node name or searched key.
        debuggee_host: Normalized host of the inspected page, if any.
        config: Ordering switches.

    Returns:
        bool: True if the name sorts in the exception block.
    """
    for rule in EXCEPTION_RULES:
        if not rule.predicate(name, debuggee_host):
            continue
        if not rule.bundler:
            return True
        if config.trace_bundler_matches:
            logger.debug(f"Bundler group '{name}' recognized by rule '{rule.name}'")
        if config.bundlers_as_exceptions:
            return True
    return False

# -----------------------------------------------------------------------------
# MATCHER CONSTRUCTION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MatchContext:
    """
    Everything a comparator needs to know about the searched key.

    Attributes:
        part: Name being looked up or inserted.
        is_dir: Whether the key is a directory.
        debuggee_host: Normalized host of the inspected page.
        source: Source being inserted, for the URL tie-break.
        sort_by_url: Order same-level sources by URL instead of name.
        config: Ordering switches.
    """
    part: str
    is_dir: bool
    debuggee_host: Optional[str] = None
    source: Optional[Source] = None
    sort_by_url: bool = False
    config: OrderingConfig = field(default=DEFAULT_ORDERING)


def compare_node(context: MatchContext, node: TreeNode) -> int:
    """
    Three-way comparison of a sibling against the searched key.

    Args:
        context: The searched key and its ordering context.
        node: Candidate sibling.

    Returns:
        int: -1 if `node` sorts first, 1 if the key sorts first, 0 on identity.
    """
    if is_exact_domain_match(context.part, node.name):
        if _orders_by_url(context, node):
            # Same-named sources stay distinct when served from different URLs
            return locale_compare(node.contents.url, context.source.url)
        return 0

    if match_with_exception(node.name, context.debuggee_host, context.config):
        return -1

    if match_with_exception(context.part, context.debuggee_host, context.config):
        return 1

    node_is_dir = node_has_children(node)
    if node_is_dir != context.is_dir:
        return -1 if node_is_dir else 1

    if _orders_by_url(context, node):
        return locale_compare(node.contents.url, context.source.url)

    return locale_compare(node.name, context.part)


def create_tree_node_matcher(
        part: str,
        is_dir: bool,
        debuggee_host: Optional[str],
        source: Optional[Source] = None,
        sort_by_url: bool = False,
        config: Optional[OrderingConfig] = None,
) -> FindNodeInContentsMatcher:
    """
    Build the comparator locating `part` among ordered siblings.

    Args:
        part: Name being looked up or inserted.
        is_dir: Whether `part` designates a directory.
        debuggee_host: Normalized host of the inspected page (see get_domain).
        source: Source being inserted, used by the URL tie-break.
        sort_by_url: Order sources by URL rather than by name.
        config: Ordering switches; defaults keep bundlers unpinned.

    Returns:
        FindNodeInContentsMatcher: Stateless comparator over tree nodes.
    """
    context = MatchContext(
        part=part,
        is_dir=is_dir,
        debuggee_host=debuggee_host,
        source=source,
        sort_by_url=bool(sort_by_url),
        config=config or DEFAULT_ORDERING,
    )
    return functools.partial(compare_node, context)

# -----------------------------------------------------------------------------
# PAIRWISE ORDERING
# -----------------------------------------------------------------------------

def compare_nodes(
        node: TreeNode,
        other: TreeNode,
        debuggee_host: Optional[str] = None,
        sort_by_url: bool = False,
        config: Optional[OrderingConfig] = None,
) -> int:
    """
    Order two siblings: negative if `node` comes before `other`.

    Uses the matcher that would be built when inserting `other`.
    """
    matcher = create_tree_node_matcher(
        other.name,
        node_has_children(other),
        debuggee_host,
        other.contents if is_source(other) else None,
        sort_by_url,
        config,
    )
    return matcher(node)


def sort_nodes(
        nodes: Sequence[TreeNode],
        debuggee_host: Optional[str] = None,
        sort_by_url: bool = False,
        config: Optional[OrderingConfig] = None,
) -> List[TreeNode]:
    """
    Return a new list holding `nodes` in display order.

    The input sequence is left untouched.

    Args:
        nodes: Siblings to order.
        debuggee_host: Normalized host of the inspected page.
        sort_by_url: Order sources by URL rather than by name.
        config: Ordering switches.

    Returns:
        List[TreeNode]: Ordered copy of `nodes`.
    """
    def _cmp(a: TreeNode, b: TreeNode) -> int:
        return compare_nodes(a, b, debuggee_host, sort_by_url, config)

    ordered = sorted(nodes, key=functools.cmp_to_key(_cmp))
    logger.debug(f"Ordered {len(ordered)} sibling nodes (debuggee host: {debuggee_host})")
    return ordered

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _orders_by_url(context: MatchContext, node: TreeNode) -> bool:
    return context.sort_by_url and context.source is not None and is_source(node)
