from __future__ import annotations

"""
ASCII Tree Parser.

Turns a textual tree diagram into an ordered forest of TreeNode objects.
Depth inference is delegated to the prefix grammar; this module only
assembles nodes using a stack of open ancestors keyed by depth.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from tree2dir.core.parsing.prefix import (
    detect_indent_width,
    has_glyphs,
    infer_depth,
    normalize_line,
    split_prefix,
)
from tree2dir.domain.constants import (
    COMMENT_MARKER,
    CURRENT_DIR_NAMES,
    DIRECTORY_MARKER,
    ENTRY_ICONS,
)
from tree2dir.domain.errors import DuplicateEntryError, MalformedTreeError
from tree2dir.domain.tree_models import NodeKind, TreeNode

logger = logging.getLogger(__name__)

# Inline note: two or more spaces, then '#'
_INLINE_COMMENT_RE = re.compile(r" {2,}#.*$")
# Closing line printed by `tree`, e.g. '3 directories, 7 files'
_TREE_REPORT_RE = re.compile(r"^\d+ director(?:y|ies)(?:, \d+ files?)?$")
_FORBIDDEN_NAME_CHARS = ("/", "\\", "\0")


class _RawEntry(NamedTuple):
    line_number: int
    line: str
    prefix: str
    token: str


@dataclass
class _Frame:
    """An open ancestor. `node` is None for a '.' root standing for the base dir."""
    depth: int
    node: Optional[TreeNode]
    index: Dict[str, TreeNode] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree(
        lines: Iterable[str],
        *,
        indent_width: int = 0,
        strip_comments: bool = True,
) -> List[TreeNode]:
    """
    Parse tree diagram lines into an ordered forest.

    Args:
        lines: Source lines (trailing newlines are ignored).
        indent_width: Columns per level for plain indentation; 0 detects it.
        strip_comments: Skip '#' comment lines and trailing '  # ...' notes.

    Returns:
        List[TreeNode]: Root nodes in source order.

    Raises:
        MalformedTreeError: On grammar violations or invalid names.
        DuplicateEntryError: When two siblings share a name.
    """
    entries = _strip_connector_margin(_scan_entries(lines, strip_comments))
    width = indent_width or detect_indent_width(e.prefix for e in entries)

    roots: List[TreeNode] = []
    root_index: Dict[str, TreeNode] = {}
    stack: List[_Frame] = []
    base_depth: Optional[int] = None

    for entry in entries:
        info = infer_depth(entry.prefix, width)
        if not info.valid:
            raise MalformedTreeError(entry.line_number, entry.line, info.reason)

        # The first entry anchors the forest; diagrams without a root line start at 1
        if base_depth is None:
            base_depth = info.depth
        depth = info.depth - base_depth
        if depth < 0:
            raise MalformedTreeError(
                entry.line_number, entry.line, "entry is shallower than the first entry"
            )

        while stack and stack[-1].depth >= depth:
            stack.pop()
        expected = stack[-1].depth + 1 if stack else 0
        if depth != expected:
            raise MalformedTreeError(
                entry.line_number, entry.line,
                f"depth jumps to level {depth} where at most level {expected} is allowed"
            )

        if entry.token.strip() in CURRENT_DIR_NAMES:
            if roots or stack or depth != 0:
                raise MalformedTreeError(
                    entry.line_number, entry.line, "'.' is only allowed as the first entry"
                )
            stack.append(_Frame(depth=0, node=None, index=root_index))
            continue

        name, kind = _classify(entry)
        parent = stack[-1] if stack else None
        siblings = parent.index if parent else root_index

        if name in siblings:
            raise DuplicateEntryError(
                name,
                entry.line_number,
                siblings[name].line_number,
                parent.node.name if parent and parent.node else "",
            )

        node = TreeNode(name=name, kind=kind, line_number=entry.line_number)
        if parent and parent.node:
            # Entries with children are directories even without a trailing slash
            parent.node.kind = NodeKind.DIRECTORY
            parent.node.children.append(node)
        else:
            roots.append(node)

        siblings[name] = node
        stack.append(_Frame(depth=depth, node=node))

    logger.debug(f"Parsed {len(entries)} entries into {len(roots)} root(s)")
    return roots


def parse_tree_text(text: str, **kwargs) -> List[TreeNode]:
    """Parse a tree diagram held in a single string."""
    return parse_tree(text.splitlines(), **kwargs)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _scan_entries(lines: Iterable[str], strip_comments: bool) -> List[_RawEntry]:
    """
    Normalize lines and keep only those declaring an entry.

    The indentation shared by every non-blank line is removed first so that
    diagrams pasted with a uniform margin parse like unindented ones.
    """
    numbered = [(n, normalize_line(raw)) for n, raw in enumerate(lines, start=1)]
    margins = [len(text) - len(text.lstrip(" ")) for _, text in numbered if text.strip()]
    margin = min(margins) if margins else 0

    entries: List[_RawEntry] = []
    for line_number, text in numbered:
        if not text.strip():
            continue
        prefix, token = split_prefix(text[margin:])
        token = token.strip()
        if not prefix and _TREE_REPORT_RE.match(token):
            continue
        if strip_comments:
            if token.startswith(COMMENT_MARKER):
                continue
            token = _INLINE_COMMENT_RE.sub("", token).strip()
        if not token:
            # Drawing-only spacer such as a lone '│'
            continue
        entries.append(_RawEntry(line_number, text, prefix, token))
    return entries


def _strip_connector_margin(entries: List[_RawEntry]) -> List[_RawEntry]:
    """
    Remove the indentation shared by every connector prefix.

    Covers diagrams whose root is flush left while the branches are indented,
    e.g. 'project/' followed by '  ├── a.txt'.
    """
    margins = [
        len(e.prefix) - len(e.prefix.lstrip(" "))
        for e in entries if has_glyphs(e.prefix)
    ]
    margin = min(margins) if margins else 0
    if not margin:
        return entries
    return [
        e._replace(prefix=e.prefix[margin:]) if has_glyphs(e.prefix) else e
        for e in entries
    ]


def _classify(entry: _RawEntry) -> Tuple[str, NodeKind]:
    """Strip decorations from an entry token and derive its name and kind."""
    token = entry.token
    for icon in ENTRY_ICONS:
        if token.startswith(icon):
            token = token[len(icon):].lstrip("\ufe0f ").strip()
            break

    kind = NodeKind.DIRECTORY if token.endswith(DIRECTORY_MARKER) else NodeKind.FILE
    name = token.rstrip(DIRECTORY_MARKER).strip()

    if not name:
        raise MalformedTreeError(entry.line_number, entry.line, "missing entry name")
    if any(ch in name for ch in _FORBIDDEN_NAME_CHARS):
        raise MalformedTreeError(entry.line_number, entry.line, "entry name contains a path separator")
    if name in (".", ".."):
        raise MalformedTreeError(entry.line_number, entry.line, f"'{name}' is not a valid entry name")
    return name, kind
