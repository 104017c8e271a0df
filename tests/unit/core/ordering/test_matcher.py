from __future__ import annotations

"""
Unit tests for the Sibling Ordering Rules.

Verifies:
1. Rule precedence (identity, exceptions, directory bias, URL tie-break, name).
2. Bundler handling under both configuration choices.
3. Pairwise comparison and non-mutating sort helpers.
"""

import dataclasses
import logging

import pytest

from sources_tree.core.ordering.matcher import (
    MatchContext,
    compare_nodes,
    create_tree_node_matcher,
    match_with_exception,
    sort_nodes,
)
from sources_tree.domain.config import OrderingConfig
from sources_tree.domain.tree_models import Source

PINNED_BUNDLERS = OrderingConfig(bundlers_as_exceptions=True)


# -----------------------------------------------------------------------------
# Rule 1: Identity
# -----------------------------------------------------------------------------
def test_identical_names_match(make_leaf, make_folder) -> None:
    assert create_tree_node_matcher("app.js", False, None)(make_leaf("app.js")) == 0
    assert create_tree_node_matcher("lib", True, None)(make_folder("lib")) == 0


def test_identity_ignores_www_prefix(make_folder) -> None:
    assert create_tree_node_matcher("example.com", True, None)(make_folder("www.example.com")) == 0
    assert create_tree_node_matcher("www.example.com", True, None)(make_folder("example.com")) == 0


def test_identity_wins_over_exceptions(make_leaf) -> None:
    matcher = create_tree_node_matcher("(index)", False, "b.com")
    assert matcher(make_leaf("(index)")) == 0


# -----------------------------------------------------------------------------
# Rules 2 and 3: Exceptions
# -----------------------------------------------------------------------------
def test_index_node_sorts_before_regular_key(make_leaf) -> None:
    matcher = create_tree_node_matcher("a.com", False, None)
    assert matcher(make_leaf("(index)")) == -1


def test_debuggee_host_node_sorts_first(make_folder) -> None:
    matcher = create_tree_node_matcher("a.com", True, "b.com")
    assert matcher(make_folder("b.com")) == -1
    assert matcher(make_folder("www.b.com")) == -1


def test_exception_nodes_sort_before_any_regular_key(make_leaf) -> None:
    siblings = [make_leaf("(index)"), make_leaf("a.com"), make_leaf("b.com")]
    matcher = create_tree_node_matcher("0.org", False, "b.com")

    results = {node.name: matcher(node) for node in siblings}

    assert results["(index)"] < 0
    assert results["b.com"] < 0
    assert results["a.com"] > 0


def test_exception_key_sorts_before_regular_nodes(make_leaf, make_folder) -> None:
    matcher = create_tree_node_matcher("b.com", True, "b.com")
    assert matcher(make_folder("a.com")) == 1
    assert matcher(make_leaf("0.js")) == 1
    assert create_tree_node_matcher("(index)", False, None)(make_folder("aaa")) == 1


def test_extension_origins_are_exceptions(make_folder) -> None:
    matcher = create_tree_node_matcher("a.com", True, None)
    assert matcher(make_folder("moz-extension://4a1f")) == -1
    assert matcher(make_folder("chrome-extension://abcdef")) == -1


def test_regular_names_with_dots_are_not_exceptions(make_folder) -> None:
    matcher = create_tree_node_matcher("b.com", True, None)
    assert matcher(make_folder("a.com")) == -1
    assert matcher(make_folder("c.com")) == 1


def test_no_debuggee_host_pins_nothing() -> None:
    assert not match_with_exception("b.com", None)
    assert not match_with_exception("", None)
    assert match_with_exception("b.com", "b.com")


# -----------------------------------------------------------------------------
# Bundler groups
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("bundler", ["ng://", "webpack://"])
def test_bundlers_order_alphabetically_by_default(make_folder, bundler: str) -> None:
    assert create_tree_node_matcher("a", True, None)(make_folder(bundler)) == 1
    assert create_tree_node_matcher("zzz", True, None)(make_folder(bundler)) == -1
    assert not match_with_exception(bundler, None)


@pytest.mark.parametrize("bundler", ["ng://", "webpack://"])
def test_bundlers_pinned_when_configured(make_folder, bundler: str) -> None:
    assert create_tree_node_matcher("a", True, None, config=PINNED_BUNDLERS)(make_folder(bundler)) == -1
    assert create_tree_node_matcher(bundler, True, None, config=PINNED_BUNDLERS)(make_folder("a")) == 1
    assert match_with_exception(bundler, None, PINNED_BUNDLERS)


def test_bundler_trace_is_gated(make_folder, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="sources_tree.core.ordering.matcher")

    create_tree_node_matcher("a", True, None)(make_folder("webpack://"))
    assert not [r for r in caplog.records if "webpack://" in r.getMessage()]

    traced = OrderingConfig(trace_bundler_matches=True)
    create_tree_node_matcher("a", True, None, config=traced)(make_folder("webpack://"))
    messages = [r.getMessage() for r in caplog.records]
    assert any("webpack://" in m and "webpack-bundler" in m for m in messages)


# -----------------------------------------------------------------------------
# Rule 4: Directories before sources
# -----------------------------------------------------------------------------
def test_directory_node_sorts_before_source_key(make_folder) -> None:
    matcher = create_tree_node_matcher("a", False, None)
    assert matcher(make_folder("z")) == -1


def test_directory_key_sorts_before_source_node(make_leaf) -> None:
    matcher = create_tree_node_matcher("z", True, None)
    assert matcher(make_leaf("a")) == 1


def test_empty_directory_still_counts_as_directory(make_folder) -> None:
    matcher = create_tree_node_matcher("a.js", False, None)
    assert matcher(make_folder("zz", [])) == -1


# -----------------------------------------------------------------------------
# Rule 5: URL tie-break
# -----------------------------------------------------------------------------
def test_same_name_sources_order_by_url(make_leaf) -> None:
    node = make_leaf("index.js", "http://a/index.js")

    later = create_tree_node_matcher("index.js", False, None, Source("http://b/index.js"), True)
    earlier = create_tree_node_matcher("index.js", False, None, Source("http://0/index.js"), True)
    same = create_tree_node_matcher("index.js", False, None, Source("http://a/index.js"), True)

    assert later(node) == -1
    assert earlier(node) == 1
    assert same(node) == 0


def test_sort_by_url_replaces_name_order(make_leaf) -> None:
    node = make_leaf("z.js", "http://a/z.js")
    matcher = create_tree_node_matcher("b.js", False, None, Source("http://b/b.js"), True)
    assert matcher(node) == -1


def test_sort_by_url_needs_source(make_leaf) -> None:
    node = make_leaf("z.js", "http://a/z.js")
    assert create_tree_node_matcher("b.js", False, None, None, True)(node) == 1


def test_sort_by_url_disabled_uses_names(make_leaf) -> None:
    node = make_leaf("index.js", "http://a/index.js")
    matcher = create_tree_node_matcher("index.js", False, None, Source("http://b/index.js"), False)
    assert matcher(node) == 0


def test_sort_by_url_ignores_directories(make_folder) -> None:
    matcher = create_tree_node_matcher("b", True, None, Source("http://0/b"), True)
    assert matcher(make_folder("a")) == -1


# -----------------------------------------------------------------------------
# Rule 6: Names
# -----------------------------------------------------------------------------
def test_names_compare_with_locale_collation(make_leaf) -> None:
    matcher = create_tree_node_matcher("b.js", False, None)
    assert matcher(make_leaf("A.js")) == -1
    assert matcher(make_leaf("C.js")) == 1
    assert create_tree_node_matcher("B.js", False, None)(make_leaf("a.js")) == -1


def test_matcher_is_stateless(make_leaf) -> None:
    matcher = create_tree_node_matcher("m.js", False, None)
    node = make_leaf("a.js")
    assert [matcher(node) for _ in range(3)] == [-1, -1, -1]


def test_match_context_is_immutable() -> None:
    context = MatchContext(part="a", is_dir=False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.part = "b"  # type: ignore[misc]


# -----------------------------------------------------------------------------
# Pairwise helpers
# -----------------------------------------------------------------------------
def test_compare_nodes_is_antisymmetric_for_regular_nodes(make_leaf, make_folder) -> None:
    a, b = make_folder("src"), make_leaf("app.js")
    assert compare_nodes(a, b) == -1
    assert compare_nodes(b, a) == 1
    assert compare_nodes(a, a) == 0


def test_compare_nodes_applies_matcher_of_other_to_node(make_folder) -> None:
    host_group, other_group = make_folder("b.com"), make_folder("a.com")

    assert compare_nodes(host_group, other_group, "b.com") == -1
    assert compare_nodes(other_group, host_group, "b.com") == 1


def test_sort_nodes_orders_full_level(make_leaf, make_folder) -> None:
    nodes = [
        make_leaf("b.js"),
        make_folder("zeta"),
        make_leaf("a.js"),
        make_leaf("(index)"),
        make_folder("Alpha"),
    ]
    original = list(nodes)

    ordered = sort_nodes(nodes)

    assert [n.name for n in ordered] == ["(index)", "Alpha", "zeta", "a.js", "b.js"]
    assert nodes == original


def test_sort_nodes_puts_exceptions_first(make_leaf) -> None:
    nodes = [make_leaf("a.com"), make_leaf("b.com"), make_leaf("(index)")]

    ordered = sort_nodes(nodes, debuggee_host="b.com")

    assert {n.name for n in ordered[:2]} == {"(index)", "b.com"}
    assert ordered[2].name == "a.com"


def test_sort_nodes_by_url(make_leaf) -> None:
    nodes = [
        make_leaf("a.js", "http://c/a.js"),
        make_leaf("b.js", "http://a/b.js"),
        make_leaf("c.js", "http://b/c.js"),
    ]
    assert [n.name for n in sort_nodes(nodes, sort_by_url=True)] == ["b.js", "c.js", "a.js"]
    assert [n.name for n in sort_nodes(nodes)] == ["a.js", "b.js", "c.js"]
