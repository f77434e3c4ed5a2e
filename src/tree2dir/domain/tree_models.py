from __future__ import annotations

"""
Tree Structure Data Models.

Provides the node types produced by the parser and the lightweight records
exchanged between the materializer and the presentation layers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Classification of a tree entry."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass
class TreeNode:
    """
    Represents one entry (directory or file) of a parsed ASCII tree.

    Attributes:
        name: Entry name without the trailing directory marker.
        kind: Directory or file classification.
        children: Ordered child entries (directories only).
        line_number: 1-based source line the entry was declared on.
    """
    name: str
    kind: NodeKind = NodeKind.FILE
    children: List["TreeNode"] = field(default_factory=list)
    line_number: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def walk(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class PlannedEntry:
    """
    A single path scheduled for creation.

    Attributes:
        rel_path: Path relative to the output base directory.
        kind: Directory or file.
        depth: Nesting level (0 for roots).
    """
    rel_path: str
    kind: NodeKind
    depth: int


@dataclass(frozen=True)
class EntryOutcome:
    """
    Result of processing one planned entry.

    Attributes:
        rel_path: Path relative to the output base directory.
        kind: Directory or file.
        status: 'created', 'exists' or 'planned' (dry run).
    """
    rel_path: str
    kind: NodeKind
    status: str


@dataclass
class MaterializationReport:
    """Accumulated outcome of a materialization run."""
    base_path: str
    dry_run: bool = False
    entries: List[EntryOutcome] = field(default_factory=list)

    @property
    def created(self) -> int:
        return sum(1 for e in self.entries if e.status == "created")

    @property
    def existing(self) -> int:
        return sum(1 for e in self.entries if e.status == "exists")
