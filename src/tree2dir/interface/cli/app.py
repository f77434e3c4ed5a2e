from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging
(defaults, saved session, and CLI overrides), logging bootstrap, input
acquisition, engine execution, and result rendering.

Exit codes:
    0 success, 1 parse error, 2 filesystem error, 130 interrupted.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from tree2dir.core.pipeline.engine import run_generation
from tree2dir.core.pipeline.validator import validate_config
from tree2dir.domain.config import get_config_path, get_default_config, load_config, save_config
from tree2dir.domain.result_models import ERROR_KIND_FILESYSTEM, ERROR_KIND_PARSE, GenerationResult
from tree2dir.infra.fs import STDIN_LABEL, read_tree_file, read_tree_stream
from tree2dir.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from tree2dir.interface.cli import args as cli_args
from tree2dir.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_FILESYSTEM_ERROR = 2
EXIT_INTERRUPTED = 130

_EXIT_CODES = {
    ERROR_KIND_PARSE: EXIT_PARSE_ERROR,
    ERROR_KIND_FILESYSTEM: EXIT_FILESYSTEM_ERROR,
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults or saved session, then CLI overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    log_file = args.log_file or (get_default_log_path() if clean_conf["save_log"] else None)
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=log_file,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config and save_config(clean_conf):
        print(i18n.t("cli.status.config_saved", path=get_config_path()), file=sys.stderr)

    human = not args.json_output

    # 4. Input acquisition
    source = args.tree_file or STDIN_LABEL
    try:
        if args.tree_file:
            if human:
                print(i18n.t("cli.status.reading_file", path=args.tree_file))
            lines = read_tree_file(args.tree_file)
        else:
            _print_prompt()
            lines = read_tree_stream()
    except KeyboardInterrupt:
        return _interrupted()
    except OSError as e:
        msg = i18n.t("cli.errors.read_failed", path=source, error=e.strerror or str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FILESYSTEM_ERROR

    # 5. Engine execution phase
    if human:
        print(i18n.t("cli.status.parsing"))
    try:
        result = run_generation(lines, clean_conf, source=source)
    except KeyboardInterrupt:
        return _interrupted()
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        if args.print_tree and result.tree_lines:
            print("\n".join(result.tree_lines))
        _print_human_summary(result, display_root=args.output_dir or "")

    if result.ok:
        return EXIT_OK
    return _EXIT_CODES.get(result.error_kind, EXIT_PARSE_ERROR)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged and None values never replace a base value.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_prompt() -> None:
    """Explain how to finish typing when a person is at the keyboard."""
    if sys.stdin is not None and sys.stdin.isatty():
        print(i18n.t("cli.prompt.intro"), file=sys.stderr)
        print(i18n.t("cli.prompt.finish"), file=sys.stderr)


def _interrupted() -> int:
    msg = i18n.t("cli.status.interrupted")
    logger.warning(msg)
    print(msg, file=sys.stderr)
    return EXIT_INTERRUPTED


def _print_human_summary(result: GenerationResult, display_root: str = "") -> None:
    """
    Format and print a generation result to the terminal.

    Args:
        result: The result to render.
        display_root: Prefix used when echoing paths (the -o value as typed).
    """
    if not result.ok:
        key = "cli.errors.filesystem" if result.error_kind == ERROR_KIND_FILESYSTEM else "cli.errors.parse"
        print(f"ERROR: {i18n.t(key, error=result.error)}", file=sys.stderr)
        created = result.summary.get("created", 0)
        if created:
            print(i18n.t("cli.errors.partial", count=created), file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run_title"))
        for line in result.preview_lines:
            print(line)
        print(i18n.t("cli.status.dry_run_done"))
        return

    for entry in result.entries:
        path = os.path.join(display_root, entry["rel_path"])
        action = "created" if entry["status"] == "created" else "existing"
        noun = "dir" if entry["kind"] == "directory" else "file"
        print(i18n.t(f"cli.status.{action}_{noun}", path=path))

    summary = result.summary
    print(i18n.t("cli.status.success", path=display_root or "."))
    print(i18n.t("cli.status.summary", created=summary.get("created", 0), existing=summary.get("existing", 0)))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
