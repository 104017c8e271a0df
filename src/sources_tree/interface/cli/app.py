from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging (defaults, optional JSON file, flag overrides), command
dispatch and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from sources_tree.core.ordering import get_domain, locate, sort_nodes
from sources_tree.core.validator import validate_config
from sources_tree.domain.config import OrderingConfig, load_config
from sources_tree.domain.tree_models import (
    Source,
    TreeNode,
    create_directory_node,
    is_directory,
)
from sources_tree.infra.logging import LoggingConfig, configure_logging, get_logger
from sources_tree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Configuration hierarchy: defaults < file < flags
    raw_conf = load_config(args.config_path)
    raw_conf.update(cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=args.log_file,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"Running command '{args.command}'")
    try:
        payload = _dispatch(args, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Command '{args.command}' failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human(args.command, payload)
    return 0

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _dispatch(args: Any, conf: Dict[str, Any]) -> Dict[str, Any]:
    if args.command == "domain":
        return {"domains": {url: get_domain(url) for url in args.urls}}

    ordering = OrderingConfig.from_dict(conf)
    debuggee_host = get_domain(args.debuggee_url)
    ordered = sort_nodes(args.entries, debuggee_host, conf["sort_by_url"], ordering)

    if args.command == "sort":
        return {"debuggee_host": debuggee_host, "order": _serialize(ordered)}

    # locate: search the ordered siblings as a directory level
    level = create_directory_node("", "", ordered)
    source = Source(url=args.part_url) if args.part_url else None
    result = locate(
        level,
        args.part,
        args.part_is_dir,
        debuggee_host,
        source,
        conf["sort_by_url"],
        ordering,
    )
    return {
        "debuggee_host": debuggee_host,
        "part": args.part,
        "found": result.found,
        "index": result.index,
        "order": _serialize(ordered),
    }

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _serialize(nodes: List[TreeNode]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for node in nodes:
        entry: Dict[str, Any] = {"name": node.name, "type": node.type}
        if not is_directory(node):
            entry["url"] = node.contents.url
        out.append(entry)
    return out


def _print_human(command: str, payload: Dict[str, Any]) -> None:
    if command == "domain":
        for url, domain in payload["domains"].items():
            print(f"{url}\t{domain or '-'}")
        return

    for i, entry in enumerate(payload["order"]):
        suffix = "/" if entry["type"] == "directory" else ""
        print(f"{i:>3}  {entry['name']}{suffix}")

    if command == "locate":
        state = "found at" if payload["found"] else "insert at"
        print(f"{payload['part']}: {state} {payload['index']}")


if __name__ == "__main__":
    sys.exit(main())
