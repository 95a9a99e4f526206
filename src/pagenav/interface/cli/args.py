from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema for the 'next-page' and 'list-pages'
commands and translates parsed namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pagenav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)

    # --- Inputs ---
    common.add_argument(
        "--navigation",
        dest="navigation_path",
        default=None,
        help="Navigation YAML/JSON file.",
    )
    common.add_argument(
        "--shared",
        dest="shared_track",
        default=None,
        help="Name of the shared track directory (default: shared).",
    )

    # --- Configuration and Diagnostics ---
    common.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="YAML/JSON settings file. Command-line options take precedence.",
    )
    common.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    common.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotating) log file.",
    )
    common.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    p = argparse.ArgumentParser(
        prog="pagenav",
        description="Resolve next pages and list pages of a static-site navigation map.",
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- next-page ---
    nxt = sub.add_parser(
        "next-page",
        parents=[common],
        help="Print the next page(s) of the current page as a JSON mapping.",
    )
    nxt.add_argument(
        "--current-page",
        dest="current_page",
        default=None,
        help="Current page path, relative to the site root.",
    )
    nxt.add_argument(
        "--id-prefix",
        dest="id_prefix",
        default=None,
        help="Prefix for the keys of the output mapping (default: next_page).",
    )
    nxt.add_argument(
        "--default-track",
        dest="default_track",
        default=None,
        help="Track used to address root-level pages (default: the shared track).",
    )
    nxt.add_argument(
        "--url-prefix",
        dest="url_prefix",
        default=None,
        help="Prefix prepended to every next page path.",
    )

    # --- list-pages ---
    lst = sub.add_parser(
        "list-pages",
        parents=[common],
        help="Print the file path of every page, one per line.",
    )
    lst.add_argument(
        "--root-path",
        dest="root_path",
        default=None,
        help="Directory to prefix the page paths with.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options that were not given are omitted so they do not mask values
    coming from defaults or a settings file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    keys = [
        "navigation_path", "shared_track", "current_page",
        "id_prefix", "default_track", "url_prefix", "root_path",
    ]
    overrides: Dict[str, Any] = {}
    for k in keys:
        value = getattr(args, k, None)
        if value is not None:
            overrides[k] = value
    return overrides
