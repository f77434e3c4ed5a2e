from __future__ import annotations

"""
Domain Constants.

Glyph alphabets for the tree grammar, decorative icons, and versioning.
"""

from typing import Dict, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE GRAMMAR
# -----------------------------------------------------------------------------

PIPE = "│"
BRANCH = "├"
LAST_BRANCH = "└"
DASH = "─"

BRANCH_GLYPHS = BRANCH + LAST_BRANCH
BOX_GLYPHS = PIPE + BRANCH + LAST_BRANCH + DASH

# ASCII branch heads as printed by `tree --charset=ascii` and friends.
# A head followed by dashes is a branch; a lone '|' is a level guide.
ASCII_BRANCH_HEADS: Dict[str, str] = {
    "|": BRANCH,
    "+": BRANCH,
    "`": LAST_BRANCH,
    "\\": LAST_BRANCH,
}
ASCII_PIPE = "|"
ASCII_DASH = "-"

DEFAULT_INDENT_WIDTH = 4
TAB_WIDTH = 4

DIRECTORY_MARKER = "/"
COMMENT_MARKER = "#"

# Icons emitted by preview renderers; stripped if pasted back as input
ENTRY_ICONS: Tuple[str, ...] = ("📁", "📂", "📄")
DIRECTORY_ICON = "📂"
FILE_ICON = "📄"

# Names that resolve to the output directory itself
CURRENT_DIR_NAMES: Tuple[str, ...] = (".", "./")
