from __future__ import annotations

"""
Generation Engine.

Orchestrates a complete run: parse the tree text, then materialize or
preview it. The whole input is parsed before the filesystem is touched, so
a malformed tree never produces partial output. Domain errors are converted
into GenerationResult objects for the interface layer.
"""

import logging
from typing import Any, Dict, Iterable

from tree2dir.core.materialize.materializer import MaterializeMode, materialize, plan_entries
from tree2dir.core.parsing.parser import parse_tree
from tree2dir.core.rendering.renderer import render_preview, render_tree
from tree2dir.domain.errors import TreeFilesystemError, TreeParseError
from tree2dir.domain.result_models import (
    ERROR_KIND_FILESYSTEM,
    ERROR_KIND_PARSE,
    GenerationResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_generation(
        lines: Iterable[str],
        config: Dict[str, Any],
        source: str = "<input>",
) -> GenerationResult:
    """
    Parse tree lines and materialize them according to a validated config.

    Args:
        lines: Tree diagram lines.
        config: Configuration as returned by validate_config().
        source: Human readable label of where the lines came from.

    Returns:
        GenerationResult: Success or error result; never raises domain errors.
    """
    logger.info(f"Parsing ASCII tree from {source}")

    # 1. Parsing phase (pure)
    try:
        forest = parse_tree(
            lines,
            indent_width=int(config.get("indent_width", 0)),
            strip_comments=bool(config.get("strip_comments", True)),
        )
    except TreeParseError as e:
        logger.error(f"Parse error in {source}: {e}")
        return create_error_result(
            str(e), ERROR_KIND_PARSE, config, source,
            summary_extra={"line_number": e.line_number},
        )

    if not forest:
        msg = "The tree is empty: no entries were found."
        logger.error(f"{msg} ({source})")
        return create_error_result(msg, ERROR_KIND_PARSE, config, source)

    # 2. Materialization phase
    dry_run = bool(config.get("dry_run", False))
    mode = MaterializeMode.DRY_RUN if dry_run else MaterializeMode.CREATE
    try:
        report = materialize(
            forest,
            config["output_dir"],
            mode=mode,
            strict=bool(config.get("strict", False)),
        )
    except TreeFilesystemError as e:
        return create_error_result(
            str(e), ERROR_KIND_FILESYSTEM, config, source,
            report=e.report,
            summary_extra={"path": e.path},
        )

    # 3. Presentation payload
    preview_lines = render_preview(plan_entries(forest)) if dry_run else []

    return create_success_result(
        config, source, report,
        tree_lines=render_tree(forest),
        preview_lines=preview_lines,
        summary_extra={"roots": [root.name for root in forest]},
    )
