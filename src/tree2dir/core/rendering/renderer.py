from __future__ import annotations

"""
Tree Renderer.

Converts forests and planned entries into display lines: the indented
dry-run preview and the canonical connector diagram.
"""

import os
from typing import List, Optional, Sequence

from tree2dir.domain.constants import DIRECTORY_ICON, DIRECTORY_MARKER, FILE_ICON
from tree2dir.domain.tree_models import NodeKind, PlannedEntry, TreeNode

PREVIEW_INDENT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_preview(entries: Sequence[PlannedEntry], icons: bool = True) -> List[str]:
    """
    Render planned entries as an indented listing.

    Args:
        entries: Pre-order planned entries.
        icons: Prefix names with folder/file icons.

    Returns:
        List[str]: One line per entry.
    """
    lines: List[str] = []
    for entry in entries:
        name = os.path.basename(entry.rel_path)
        if icons:
            icon = DIRECTORY_ICON if entry.kind is NodeKind.DIRECTORY else FILE_ICON
            label = f"{icon} {name}"
        else:
            label = name + (DIRECTORY_MARKER if entry.kind is NodeKind.DIRECTORY else "")
        lines.append(f"{PREVIEW_INDENT * entry.depth}{label}")
    return lines


def render_tree(forest: Sequence[TreeNode], lines: Optional[List[str]] = None) -> List[str]:
    """
    Render a forest with box-drawing connectors.

    Roots are printed flush left and directories keep their trailing slash,
    so the output is valid parser input.

    Args:
        forest: Root nodes.
        lines: Optional accumulator to append to.

    Returns:
        List[str]: The rendered diagram.
    """
    out = lines if lines is not None else []
    for root in forest:
        out.append(_label(root))
        _render_children(root.children, out, prefix="")
    return out

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _label(node: TreeNode) -> str:
    return node.name + (DIRECTORY_MARKER if node.is_dir else "")


def _render_children(children: Sequence[TreeNode], lines: List[str], prefix: str) -> None:
    total = len(children)
    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(child)}")
        if child.children:
            _render_children(child.children, lines, prefix + ("    " if is_last else "│   "))
