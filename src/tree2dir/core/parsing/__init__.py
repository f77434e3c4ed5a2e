from __future__ import annotations

from .parser import parse_tree, parse_tree_text
from .prefix import PrefixDepth, detect_indent_width, infer_depth, split_prefix

__all__ = [
    "parse_tree",
    "parse_tree_text",
    "PrefixDepth",
    "infer_depth",
    "detect_indent_width",
    "split_prefix",
]
