from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the diagnostic front end and converts
parsed namespaces into configuration overrides and tree nodes.
"""

import argparse
from typing import Any, Dict

from sources_tree.domain.constants import APP_NAME, APP_VERSION
from sources_tree.domain.tree_models import (
    Source,
    TreeNode,
    create_directory_node,
    create_source_node,
)

DIRECTORY_PREFIX = "dir:"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sources-tree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Inspect the ordering rules of the sources tree.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )
    common.add_argument(
        "--debuggee-url",
        dest="debuggee_url",
        default=None,
        help="URL of the inspected page; its domain group is pinned first.",
    )
    common.add_argument(
        "--sort-by-url",
        action="store_true",
        help="Order sources by URL instead of by name.",
    )
    common.add_argument(
        "--bundlers-as-exceptions",
        action="store_true",
        help="Pin ng:// and webpack:// groups with the other exceptions.",
    )
    common.add_argument(
        "--trace-bundlers",
        action="store_true",
        help="Log every comparison that recognizes a bundler group.",
    )
    common.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print machine-readable JSON.",
    )
    common.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    common.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated by size).",
    )

    sub = p.add_subparsers(dest="command", required=True)

    # --- domain ---
    p_domain = sub.add_parser("domain", parents=[common], help="Print the domain of each URL.")
    p_domain.add_argument("urls", nargs="+", metavar="URL")

    # --- sort ---
    p_sort = sub.add_parser(
        "sort",
        parents=[common],
        help="Print siblings in tree order.",
        description=_entry_help(),
    )
    p_sort.add_argument("entries", nargs="+", metavar="ENTRY", type=parse_entry)

    # --- locate ---
    p_locate = sub.add_parser(
        "locate",
        parents=[common],
        help="Report where a name sits among ordered siblings.",
        description=_entry_help(),
    )
    p_locate.add_argument("part", metavar="PART")
    p_locate.add_argument("entries", nargs="*", metavar="ENTRY", type=parse_entry)
    p_locate.add_argument(
        "--dir",
        dest="part_is_dir",
        action="store_true",
        help="Treat PART as a directory.",
    )
    p_locate.add_argument(
        "--url",
        dest="part_url",
        default=None,
        help="URL of the source PART stands for (used with --sort-by-url).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only flags actually passed produce an override, so values from a
    configuration file survive when the flag is omitted.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.sort_by_url:
        overrides["sort_by_url"] = True
    if args.bundlers_as_exceptions:
        overrides["bundlers_as_exceptions"] = True
    if args.trace_bundlers:
        overrides["trace_bundler_matches"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def parse_entry(text: str) -> TreeNode:
    """
    Convert an ENTRY argument into a tree node.

    Syntax: "dir:NAME" for a directory, "NAME=URL" for a source served
    from URL, plain "NAME" for a source whose URL is its name.

    Raises:
        argparse.ArgumentTypeError: If the entry has an empty name, or is a
            plain name ending in "/" (directories need the "dir:" prefix).
    """
    if text.startswith(DIRECTORY_PREFIX):
        name = text[len(DIRECTORY_PREFIX):]
        _require_name(name, text)
        return create_directory_node(name, name)

    name, sep, url = text.partition("=")
    _require_name(name, text)
    if not sep and name.endswith("/"):
        # "webpack://" ends in a slash too, so the slash cannot mark a directory
        raise argparse.ArgumentTypeError(
            f"invalid entry '{text}': use '{DIRECTORY_PREFIX}{_directory_name(name)}' for a directory "
            f"or '{name}=URL' for a source"
        )
    return create_source_node(name, name, Source(url=url if sep else name))

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _require_name(name: str, text: str) -> None:
    if not name:
        raise argparse.ArgumentTypeError(f"invalid entry '{text}': empty name")


def _directory_name(name: str) -> str:
    return name if name.endswith("://") else name.rstrip("/")


def _entry_help() -> str:
    return (
        "ENTRY is 'dir:NAME' for a directory, 'NAME=URL' for a source "
        "served from URL, or 'NAME' for a source. A trailing '/' does "
        "not mark a directory."
    )
