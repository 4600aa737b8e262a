from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, resolution of
options (command-line flags or the interactive prompt), validation into
an immutable configuration, tree generation and output rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from directorytree.core.pipeline.engine import format_summary, run_tree
from directorytree.core.pipeline.stages.validator import validate_config
from directorytree.domain.tree_models import TreeResult
from directorytree.infra.fs import FileSystem
from directorytree.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from directorytree.interface.cli import args as cli_args
from directorytree.interface.cli.prompt import prompt_for_options
from directorytree.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ROOT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, fs: Optional[FileSystem] = None) -> int:
    """
    Execute the main CLI application workflow.

    Without any argument the options are collected interactively.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv[1:].
        fs: Filesystem implementation override (local disk when omitted).

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    argv = sys.argv[1:] if argv is None else list(argv)

    # 1. Argument parsing phase (unknown flags are reported, not fatal)
    parser = cli_args.build_parser()
    args, unknown = parser.parse_known_args(argv)

    # 2. Logging bootstrap (console stderr, optional file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file), force=True)

    try:
        return _execute(args, unknown, interactive=not argv, fs=fs)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.debug(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        shutdown_logging()


def _execute(args: Any, unknown: List[str], interactive: bool, fs: Optional[FileSystem]) -> int:
    """Resolve options, run the tree generation and print the outcome."""
    if unknown:
        logger.warning(i18n.t("cli.notices.unknown_args", args=" ".join(unknown)))
    for flag in cli_args.flags_missing_value(args):
        logger.warning(i18n.t("cli.notices.missing_value", flag=flag))

    # 3. Option source: interactive prompt or command-line flags
    if interactive:
        logger.debug("No arguments supplied. Entering interactive mode.")
        raw: Dict[str, Any] = prompt_for_options()
    else:
        raw = cli_args.args_to_overrides(args)

    # 4. Schema validation and normalization
    config, warnings = validate_config(raw, strict=False)
    for w in warnings:
        logger.warning(f"Option Constraint: {w}")

    if args.dump_config:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Tree generation
    result = run_tree(config, fs)
    if not result.ok:
        msg = i18n.t("cli.errors.invalid_root", error=result.error)
        logger.debug(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_ROOT

    # 6. Output rendering phase
    _print_tree(result, show_summary=bool(args.summary))
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_tree(result: TreeResult, show_summary: bool = False) -> None:
    """
    Print the header, the tree and the optional summary to stdout.

    Args:
        result: Successful tree result to render.
        show_summary: Append the directory/file count footer.
    """
    print(result.header)
    print()
    for line in result.lines:
        print(line)

    if show_summary:
        print()
        print(format_summary(result.stats))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
