from __future__ import annotations

"""
Generation Result Data Models.

Defines the immutable result object and factory functions used to
communicate engine outcomes to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tree2dir.domain.tree_models import MaterializationReport

ERROR_KIND_PARSE = "parse"
ERROR_KIND_FILESYSTEM = "filesystem"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Unified result object of a complete parse-and-materialize run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: '' on success, 'parse' or 'filesystem' on failure.
        source: Label of the input (file path or '<stdin>').
        base_path: Absolute output base directory.
        dry_run: Whether the run was a preview only.
        strict: Whether existing files were treated as conflicts.
        entries: Processed entries as dicts (rel_path, kind, status).
        tree_lines: Canonical connector rendering of the parsed tree.
        preview_lines: Rendered dry-run preview.
        summary: Counters and diagnostic metadata.
    """
    ok: bool
    error: str
    error_kind: str

    source: str
    base_path: str
    dry_run: bool
    strict: bool

    entries: List[Dict[str, str]] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    preview_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def _entries_as_dicts(report: Optional[MaterializationReport]) -> List[Dict[str, str]]:
    if report is None:
        return []
    return [
        {"rel_path": e.rel_path, "kind": e.kind.value, "status": e.status}
        for e in report.entries
    ]


def create_error_result(
        error: str,
        error_kind: str,
        cfg: Dict[str, Any],
        source: str,
        report: Optional[MaterializationReport] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a failed generation result.

    Entries already processed before the failure are preserved so the
    caller can tell what was left on disk.

    Args:
        error: Detailed error description.
        error_kind: 'parse' or 'filesystem'.
        cfg: Configuration used during the run.
        source: Input label.
        report: Partial materialization report, if any.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result object.
    """
    summary: Dict[str, Any] = {"created": report.created if report else 0}
    summary.update(summary_extra or {})
    return GenerationResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        source=source,
        base_path=cfg.get("output_dir", ""),
        dry_run=bool(cfg.get("dry_run", False)),
        strict=bool(cfg.get("strict", False)),
        entries=_entries_as_dicts(report),
        summary=summary,
    )


def create_success_result(
        cfg: Dict[str, Any],
        source: str,
        report: MaterializationReport,
        tree_lines: Optional[List[str]] = None,
        preview_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        cfg: Final configuration used during execution.
        source: Input label.
        report: Materialization report for the run.
        tree_lines: Canonical rendering of the parsed tree.
        preview_lines: Rendered dry-run preview.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable success result object.
    """
    summary: Dict[str, Any] = {
        "dry_run": report.dry_run,
        "total": len(report.entries),
        "created": report.created,
        "existing": report.existing,
    }
    summary.update(summary_extra or {})
    return GenerationResult(
        ok=True,
        error="",
        error_kind="",
        source=source,
        base_path=report.base_path,
        dry_run=report.dry_run,
        strict=bool(cfg.get("strict", False)),
        entries=_entries_as_dicts(report),
        tree_lines=tree_lines or [],
        preview_lines=preview_lines or [],
        summary=summary,
    )
