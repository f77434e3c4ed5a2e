from __future__ import annotations

"""
Filesystem Materializer.

Walks a parsed forest in pre-order and creates the corresponding
directories and empty files under a base directory, or lists what would be
created when running in dry-run mode. Parents are always handled before
their children. Nothing is ever deleted or truncated.
"""

import errno
import logging
import os
from enum import Enum
from typing import List, Sequence

from tree2dir.domain.errors import MaterializationError, PathConflictError
from tree2dir.domain.tree_models import (
    EntryOutcome,
    MaterializationReport,
    NodeKind,
    PlannedEntry,
    TreeNode,
)
from tree2dir.infra.fs import describe_path_kind

logger = logging.getLogger(__name__)

STATUS_CREATED = "created"
STATUS_EXISTS = "exists"
STATUS_PLANNED = "planned"


class MaterializeMode(str, Enum):
    CREATE = "create"
    DRY_RUN = "dry_run"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def plan_entries(forest: Sequence[TreeNode]) -> List[PlannedEntry]:
    """
    Flatten a forest into pre-order planned entries without touching disk.

    Args:
        forest: Root nodes as returned by the parser.

    Returns:
        List[PlannedEntry]: One entry per node, parents before children.
    """
    planned: List[PlannedEntry] = []

    def _visit(node: TreeNode, parent_rel: str, depth: int) -> None:
        rel_path = os.path.join(parent_rel, node.name) if parent_rel else node.name
        planned.append(PlannedEntry(rel_path=rel_path, kind=node.kind, depth=depth))
        for child in node.children:
            _visit(child, rel_path, depth + 1)

    for root in forest:
        _visit(root, "", 0)
    return planned


def materialize(
        forest: Sequence[TreeNode],
        base_dir: str,
        *,
        mode: MaterializeMode = MaterializeMode.CREATE,
        strict: bool = False,
) -> MaterializationReport:
    """
    Create (or preview) the structure described by a forest.

    Args:
        forest: Root nodes as returned by the parser.
        base_dir: Directory under which the roots are created.
        mode: CREATE to write to disk, DRY_RUN to only list entries.
        strict: Treat pre-existing files as conflicts instead of skipping them.

    Returns:
        MaterializationReport: Ordered outcome of every entry.

    Raises:
        PathConflictError: A path exists with an incompatible kind, or a file
            exists while strict is enabled.
        MaterializationError: An I/O operation failed. Entries created before
            the failure remain on disk; the partial report is attached to the
            exception as `report`.
    """
    base_path = os.path.abspath(base_dir)
    planned = plan_entries(forest)
    report = MaterializationReport(base_path=base_path, dry_run=mode is MaterializeMode.DRY_RUN)

    if report.dry_run:
        report.entries.extend(
            EntryOutcome(rel_path=p.rel_path, kind=p.kind, status=STATUS_PLANNED) for p in planned
        )
        logger.info(f"Dry run: {len(planned)} entries planned under {base_path}")
        return report

    try:
        _ensure_directory(base_path)
        for entry in planned:
            full_path = os.path.join(base_path, entry.rel_path)
            if entry.kind is NodeKind.DIRECTORY:
                status = _ensure_directory(full_path)
            else:
                status = _ensure_file(full_path, strict)
            report.entries.append(EntryOutcome(rel_path=entry.rel_path, kind=entry.kind, status=status))
            logger.debug(f"{status.capitalize()} {entry.kind.value}: {entry.rel_path}")
    except (PathConflictError, MaterializationError) as e:
        e.report = report
        logger.error(f"Materialization aborted after {report.created} new entries: {e}")
        raise

    logger.info(
        f"Materialized {len(report.entries)} entries under {base_path} "
        f"({report.created} created, {report.existing} already present)"
    )
    return report

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _ensure_directory(path: str) -> str:
    """Create a directory (and missing parents) unless it already exists."""
    if os.path.isdir(path):
        return STATUS_EXISTS
    if os.path.lexists(path):
        raise PathConflictError(path, expected="directory", found=describe_path_kind(path))
    try:
        os.makedirs(path)
    except FileExistsError:
        if os.path.isdir(path):
            return STATUS_EXISTS
        raise PathConflictError(path, expected="directory", found=describe_path_kind(path))
    except OSError as e:
        raise MaterializationError(path, e) from e
    return STATUS_CREATED


def _ensure_file(path: str, strict: bool) -> str:
    """Create an empty file exclusively; existing files are never opened for writing."""
    try:
        with open(path, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        found = describe_path_kind(path)
        if found != "file":
            raise PathConflictError(path, expected="file", found=found)
        if strict:
            raise PathConflictError(path, expected="file", found="file")
        return STATUS_EXISTS
    except IsADirectoryError:
        raise PathConflictError(path, expected="file", found="directory")
    except OSError as e:
        # Windows reports an existing directory target as EACCES
        if e.errno == errno.EACCES and os.path.isdir(path):
            raise PathConflictError(path, expected="file", found="directory")
        raise MaterializationError(path, e) from e
    return STATUS_CREATED
