from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, settings file, command-line overrides), navigation loading and
command dispatch. Results go to stdout; diagnostics go to stderr.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from pagenav.core.navigation.loader import load_navigation
from pagenav.core.navigation.service import collect_pages, find_next_pages
from pagenav.domain.config import get_default_config, load_config_file, validate_config
from pagenav.domain.errors import NavigationError
from pagenav.domain.nav_models import NavigationTree
from pagenav.infra.logging import LoggingConfig, configure_logging, get_logger
from pagenav.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
EXIT_INTERRUPTED = 130

ERROR_PREFIX = "Error processing navigation"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Resolve configuration hierarchy
    base_conf = get_default_config()
    if args.config_file:
        try:
            base_conf = _merge_config(base_conf, load_config_file(args.config_file))
        except (OSError, ValueError) as e:
            print(f"ERROR: Cannot load settings: {e}", file=sys.stderr)
            return EXIT_MISSING_INPUT if isinstance(e, OSError) else EXIT_FAILURE

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight input verification
    nav_path = conf["navigation_path"]
    if not nav_path:
        print(f"ERROR: --navigation is required for '{args.command}'.", file=sys.stderr)
        return EXIT_MISSING_INPUT
    if not os.path.isfile(nav_path):
        msg = f"Navigation file does not exist: {nav_path}"
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_INPUT
    if args.command == "next-page" and args.current_page is None and not conf["current_page"]:
        print("ERROR: --current-page is required for 'next-page'.", file=sys.stderr)
        return EXIT_MISSING_INPUT

    # 5. Command execution phase
    try:
        tree = load_navigation(nav_path)
        _run_command(args.command, tree, conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except NavigationError as e:
        logger.debug(f"{type(e).__name__} while running '{args.command}'", exc_info=True)
        print(f"{ERROR_PREFIX}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

def _run_command(command: str, tree: NavigationTree, conf: Dict[str, Any]) -> None:
    """Run one command and print its result to stdout."""
    if command == "next-page":
        mapping = find_next_pages(tree, conf["current_page"], conf)
        print(json.dumps(mapping, ensure_ascii=False, separators=(",", ":")))
    elif command == "list-pages":
        for page in collect_pages(tree, conf):
            print(page)
    else:
        raise ValueError(f"Unknown command: {command}")

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    None values never override. Unknown keys are carried along so that
    validation can report them.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
