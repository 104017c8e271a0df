from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Node builders and sample sibling levels shared by the ordering tests.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from typing import Callable, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sources_tree.domain.tree_models import (  # noqa: E402
    DirectoryNode,
    Source,
    SourceNode,
    TreeNode,
    create_directory_node,
    create_source_node,
)
from sources_tree.infra.logging.core import _QUEUE_LISTENER_ATTR  # noqa: E402


# -----------------------------------------------------------------------------
# Node Builders
# -----------------------------------------------------------------------------
def leaf(name: str, url: Optional[str] = None) -> SourceNode:
    """Build a source node; the URL defaults to one derived from the name."""
    return create_source_node(name, name, Source(url=url or f"http://example.com/{name}"))


def folder(name: str, contents: Optional[List[TreeNode]] = None) -> DirectoryNode:
    """Build a directory node."""
    return create_directory_node(name, name, contents)


@pytest.fixture
def make_leaf() -> Callable[..., SourceNode]:
    return leaf


@pytest.fixture
def make_folder() -> Callable[..., DirectoryNode]:
    return folder


@pytest.fixture
def mixed_level() -> DirectoryNode:
    """
    A sibling level already in display order for debuggee host "b.com".

    Exceptions first, then directories, then sources, names ascending.
    """
    return folder("root", [
        leaf("(index)", "http://b.com/"),
        folder("b.com"),
        folder("alpha"),
        folder("Gamma"),
        folder("zeta"),
        leaf("app.js"),
        leaf("main.js"),
        leaf("vendor.js"),
    ])


# -----------------------------------------------------------------------------
# Logging Isolation
# -----------------------------------------------------------------------------
@pytest.fixture
def reset_logging() -> None:
    """Detach handlers installed by configure_logging before and after a test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener):
            if getattr(listener, "_thread", None) is not None:
                listener.stop()
            setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, "_sources_tree_handler", False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, "_sources_tree_configured"):
            delattr(root, "_sources_tree_configured")

    _reset()
    yield
    _reset()
