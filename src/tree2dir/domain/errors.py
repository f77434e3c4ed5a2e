from __future__ import annotations

"""
Domain Error Taxonomy.

Parse-time errors carry the offending line number; filesystem errors carry
the offending path. Both families share a common base so callers can trap
every domain failure with a single clause.
"""

from typing import Any, Optional


class Tree2DirError(Exception):
    """Base class for every error raised by tree2dir."""


# -----------------------------------------------------------------------------
# PARSE ERRORS
# -----------------------------------------------------------------------------

class TreeParseError(Tree2DirError):
    """Structural problem detected while reading the tree text."""

    def __init__(self, message: str, line_number: int = 0):
        super().__init__(message)
        self.line_number = line_number


class MalformedTreeError(TreeParseError):
    """
    The tree text violates the connector/indentation grammar.

    Attributes:
        line_number: 1-based line where the violation was detected.
        line: Raw text of that line.
        reason: Short description of the violation.
    """

    def __init__(self, line_number: int, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line.strip()!r}", line_number)


class DuplicateEntryError(TreeParseError):
    """
    Two siblings share the same name.

    Attributes:
        name: The duplicated entry name.
        line_number: Line of the second declaration.
        first_line_number: Line of the first declaration.
        parent: Name of the shared parent ('' for roots).
    """

    def __init__(self, name: str, line_number: int, first_line_number: int, parent: str = ""):
        self.name = name
        self.first_line_number = first_line_number
        self.parent = parent
        where = f"under '{parent}'" if parent else "at the top level"
        super().__init__(
            f"Line {line_number}: duplicate entry '{name}' {where} "
            f"(first declared on line {first_line_number})",
            line_number,
        )


# -----------------------------------------------------------------------------
# FILESYSTEM ERRORS
# -----------------------------------------------------------------------------

class TreeFilesystemError(Tree2DirError):
    """Failure while touching the output directory."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
        self.report: Optional[Any] = None


class PathConflictError(TreeFilesystemError):
    """
    The target path already exists and may not be reused.

    Attributes:
        path: Absolute path of the conflicting entry.
        expected: Kind the tree asked for ('directory' or 'file').
        found: Kind found on disk.
    """

    def __init__(self, path: str, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"Path conflict at '{path}': expected {expected}, found existing {found}", path)


class MaterializationError(TreeFilesystemError):
    """An I/O operation failed while creating the structure."""

    def __init__(self, path: str, cause: OSError):
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"Failed to create '{path}': {detail}", path)
