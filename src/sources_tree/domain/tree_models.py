from __future__ import annotations

"""
Sources Tree Data Models.

Provides the recursive node types of the sources display: grouping
directories and leaf sources. Also defines the comparator signature used
by ordered lookups and the result type returned by a search.
"""

from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Union

from sources_tree.domain.constants import DIRECTORY_TYPE, SOURCE_TYPE

# -----------------------------------------------------------------------------
# EXTERNAL ENTITIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Source:
    """
    A loaded resource referenced by a leaf node.

    Attributes:
        url: Full URL the resource was served from.
        id: Optional identifier assigned by the owner of the source list.
    """
    url: str
    id: str = ""

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class SourceNode:
    """
    Leaf entry of the tree, bound to a single Source.

    Attributes:
        name: Display name, unique among its siblings.
        contents: The Source the leaf stands for.
        path: Slash-separated location of the node in the tree.
    """
    name: str
    contents: Source
    path: str = ""
    type: str = field(default=SOURCE_TYPE, init=False)


@dataclass
class DirectoryNode:
    """
    Grouping entry of the tree (origin, bundler namespace or folder).

    The order of `contents` is the display order; it is kept sorted by the
    node matcher rules and owned by whoever builds the tree.
    """
    name: str
    contents: List["TreeNode"] = field(default_factory=list)
    path: str = ""
    type: str = field(default=DIRECTORY_TYPE, init=False)


TreeNode = Union[DirectoryNode, SourceNode]

# Negative: node sorts before the target. Zero: node is the target.
# Positive: node sorts after the target.
FindNodeInContentsMatcher = Callable[[TreeNode], int]


class SearchResult(NamedTuple):
    """Outcome of a sibling lookup: match position or insertion point."""
    found: bool
    index: int

# -----------------------------------------------------------------------------
# FACTORIES AND PREDICATES
# -----------------------------------------------------------------------------

def create_directory_node(
        name: str,
        path: str,
        contents: Optional[List[TreeNode]] = None,
) -> DirectoryNode:
    """Build a directory node, defaulting to an empty child list."""
    return DirectoryNode(name=name, contents=list(contents or []), path=path)


def create_source_node(name: str, path: str, source: Source) -> SourceNode:
    """Build a leaf node bound to `source`."""
    return SourceNode(name=name, contents=source, path=path)


def is_directory(node: TreeNode) -> bool:
    return node.type == DIRECTORY_TYPE


def is_source(node: TreeNode) -> bool:
    return node.type == SOURCE_TYPE


def node_has_children(node: TreeNode) -> bool:
    """
    Report whether a node is a grouping node.

    An empty directory still counts: the check is on the variant, not on
    the current number of children.

    Args:
        node: Tree node to classify.

    Returns:
        bool: True for directory nodes, False for sources.
    """
    return isinstance(node, DirectoryNode)
