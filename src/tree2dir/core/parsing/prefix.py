from __future__ import annotations

"""
Line Prefix Grammar.

Maps the connector/indentation prefix of a tree line to a nesting depth.
Two dialects are understood:

* Connector trees, as printed by `tree`:
      ├── src/
      │   └── main.py
  The branch token (├ or └ followed by dashes) ends the prefix. The gutter
  before it is split into cells as wide as the branch token plus one space,
  and each cell is either a vertical bar followed by spaces or blank.

* Plain indentation (spaces only), one level per `indent_width` columns.

ASCII connectors (|--, `--, +--, \\--) are translated to their box-drawing
equivalents before measuring.
"""

import re
from typing import Iterable, NamedTuple, Tuple

from tree2dir.domain.constants import (
    ASCII_BRANCH_HEADS,
    ASCII_DASH,
    ASCII_PIPE,
    BOX_GLYPHS,
    BRANCH_GLYPHS,
    DASH,
    DEFAULT_INDENT_WIDTH,
    PIPE,
    TAB_WIDTH,
)

# ASCII connector units; a lone '|' only counts when followed by a space
_ASCII_UNIT_RE = re.compile(r"[|`+\\]-{2,} ?|\|(?= )")
_ASCII_BRANCH_RE = re.compile(r"([|`+\\])(-{2,})")


class PrefixDepth(NamedTuple):
    """Depth inferred from a prefix, with the reason when it is unusable."""
    depth: int
    valid: bool
    reason: str = ""


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_line(line: str) -> str:
    """Expand tabs, unify non-breaking spaces and drop trailing whitespace."""
    return line.expandtabs(TAB_WIDTH).replace("\xa0", " ").rstrip()


def split_prefix(line: str) -> Tuple[str, str]:
    """
    Split a normalized line into its structural prefix and the remainder.

    Args:
        line: Line text after normalize_line().

    Returns:
        Tuple[str, str]: (prefix, remainder). The remainder starts at the
        first character that is not part of a connector or indentation.
    """
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == " " or ch in BOX_GLYPHS:
            i += 1
            continue
        m = _ASCII_UNIT_RE.match(line, i)
        if m:
            i = m.end()
            continue
        break
    return line[:i], line[i:]


def has_glyphs(prefix: str) -> bool:
    """Return True if the prefix contains any connector glyph."""
    return bool(prefix.strip(" "))


def infer_depth(prefix: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> PrefixDepth:
    """
    Compute the nesting depth encoded by a line prefix.

    Args:
        prefix: Prefix returned by split_prefix().
        indent_width: Columns per level for plain indentation.

    Returns:
        PrefixDepth: Depth plus a validity flag and reason.
    """
    if not has_glyphs(prefix):
        return _plain_indent_depth(len(prefix), indent_width)
    return _connector_depth(_to_box(prefix))


def detect_indent_width(prefixes: Iterable[str]) -> int:
    """
    Guess the plain-indentation unit from the prefixes of a document.

    Uses the smallest non-zero blank prefix; connector prefixes are ignored.
    """
    widths = [len(p) for p in prefixes if p and not has_glyphs(p)]
    return min(widths) if widths else DEFAULT_INDENT_WIDTH

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _plain_indent_depth(width: int, indent_width: int) -> PrefixDepth:
    if indent_width <= 0:
        indent_width = DEFAULT_INDENT_WIDTH
    if width % indent_width:
        return PrefixDepth(
            0, False,
            f"indentation of {width} spaces is not a multiple of {indent_width}"
        )
    return PrefixDepth(width // indent_width, True)


def _connector_depth(prefix: str) -> PrefixDepth:
    branches = [i for i, ch in enumerate(prefix) if ch in BRANCH_GLYPHS]
    if not branches:
        return PrefixDepth(0, False, "vertical bar without a branch connector")
    if len(branches) > 1:
        return PrefixDepth(0, False, "more than one branch connector")

    pos = branches[0]
    tail = prefix[pos + 1:]
    dashes = len(tail) - len(tail.lstrip(DASH))
    if dashes == 0:
        return PrefixDepth(0, False, "branch connector without dashes")
    if tail[dashes:].strip(" "):
        return PrefixDepth(0, False, "unexpected glyph after branch connector")

    cell = dashes + 2
    gutter = prefix[:pos]
    if len(gutter) % cell:
        return PrefixDepth(0, False, f"connector is not aligned to {cell}-column levels")

    for start in range(0, len(gutter), cell):
        chunk = gutter[start:start + cell]
        if chunk[0] not in (PIPE, " ") or chunk[1:].strip(" "):
            return PrefixDepth(0, False, f"malformed level guide {chunk!r}")

    return PrefixDepth(len(gutter) // cell + 1, True)


def _to_box(prefix: str) -> str:
    """Rewrite ASCII connectors with box-drawing glyphs of the same width."""
    prefix = _ASCII_BRANCH_RE.sub(
        lambda m: ASCII_BRANCH_HEADS[m.group(1)] + DASH * len(m.group(2)), prefix
    )
    return prefix.replace(ASCII_PIPE, PIPE).replace(ASCII_DASH, DASH)
