from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into the raw option dictionary consumed by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from directorytree.domain.constants import APP_VERSION
from directorytree.utils.i18n import i18n

# Stored when a value-taking flag is given without its value
MISSING_VALUE = ""

# dest -> flag name, for the value-taking options that tolerate a missing value
_VALUE_FLAGS = {
    "root_path": "--path",
    "max_depth": "--depth",
    "excluded_names": "--exclude",
}

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the directorytree CLI.

    The automatic '-h' help switch is disabled because '-h' selects
    hidden entries; help is available through '--help' only.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="directorytree",
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
        add_help=False,
    )

    # --- Traversal Scope ---
    p.add_argument(
        "-p", "--path",
        dest="root_path",
        nargs="?",
        const=MISSING_VALUE,
        default=None,
        help=i18n.t("cli.args.path"),
    )
    p.add_argument(
        "-d", "--depth",
        dest="max_depth",
        nargs="?",
        const=MISSING_VALUE,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.depth"),
    )

    # --- Presentation ---
    p.add_argument(
        "-c", "--color",
        dest="use_color",
        nargs="?",
        const="true",
        default=None,
        metavar="BOOL",
        help=i18n.t("cli.args.color"),
    )
    p.add_argument(
        "-h", "--show-hidden",
        dest="show_hidden",
        action="store_true",
        help=i18n.t("cli.args.show_hidden"),
    )
    p.add_argument(
        "-e", "--exclude",
        dest="excluded_names",
        nargs="?",
        const=MISSING_VALUE,
        default=None,
        metavar="CSV",
        help=i18n.t("cli.args.exclude"),
    )
    p.add_argument(
        "--no-dirs-first",
        dest="dirs_first",
        action="store_false",
        help=i18n.t("cli.args.no_dirs_first"),
    )
    p.add_argument(
        "--summary",
        action="store_true",
        help=i18n.t("cli.args.summary"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    p.add_argument(
        "--help",
        action="help",
        help=i18n.t("cli.args.help"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a raw option dictionary.

    Values stay as strings where the user typed them (depth, color);
    coercion and fallback warnings are the validator's job.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Option overrides; unset options map to None.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = _given(args.root_path)
    overrides["max_depth"] = _given(args.max_depth)
    overrides["use_color"] = args.use_color
    overrides["excluded_names"] = _split_csv(_given(args.excluded_names))

    if args.show_hidden:
        overrides["show_hidden"] = True
    if not args.dirs_first:
        overrides["dirs_first"] = False

    return overrides


def flags_missing_value(args: argparse.Namespace) -> List[str]:
    """
    List the value-taking flags that were given without a value.

    Such flags fall back to their default instead of aborting the run.
    """
    return [flag for dest, flag in _VALUE_FLAGS.items() if getattr(args, dest, None) == MISSING_VALUE]

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _given(value: Optional[str]) -> Optional[str]:
    """Map a flag given without a value to 'unset'."""
    return None if value == MISSING_VALUE else value


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
