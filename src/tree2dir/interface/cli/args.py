from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from tree2dir.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tree2dir CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tree2dir",
        description=i18n.t("app.description"),
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    g = sub.add_parser(
        "generate",
        help=i18n.t("cli.args.generate"),
        description=i18n.t("cli.args.generate"),
    )

    # --- Input / Output ---
    g.add_argument(
        "-f", "--file",
        dest="tree_file",
        default=None,
        help=i18n.t("cli.args.file"),
    )
    g.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.output"),
    )

    # --- Generation Policy ---
    g.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    g.add_argument("--strict", action="store_true", help=i18n.t("cli.args.strict"))

    # --- Parsing ---
    g.add_argument(
        "--indent",
        dest="indent_width",
        type=int,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.indent"),
    )
    g.add_argument("--keep-comments", action="store_true", help=i18n.t("cli.args.keep_comments"))

    # --- Output Format ---
    g.add_argument("--print-tree", action="store_true", help=i18n.t("cli.args.print_tree"))
    g.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))

    # --- Configuration and Diagnostics ---
    g.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    g.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    g.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    g.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))
    g.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides dict.

    Flags that were not given map to None (or are omitted) so the saved
    session keeps its value.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["output_dir"] = args.output_dir
    overrides["indent_width"] = args.indent_width

    if args.dry_run:
        overrides["dry_run"] = True
    if args.strict:
        overrides["strict"] = True
    if args.keep_comments:
        overrides["strip_comments"] = False

    return overrides
