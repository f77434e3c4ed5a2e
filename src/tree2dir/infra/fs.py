from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, user data directory resolution,
and tree source reading. Acts as an abstraction over the 'os' module to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
import sys
from typing import List, Optional, TextIO

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "tree2dir"
UNIX_APP_DIR_NAME = ".tree2dir"
STDIN_LABEL = "<stdin>"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/tree2dir
    - Linux/Mac: ~/.tree2dir

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        # Read-only homes still get a resolvable path; writers report their own errors
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def describe_path_kind(path: str) -> str:
    """Return 'directory', 'file' or 'other' for an existing path."""
    if os.path.isdir(path):
        return "directory"
    if os.path.isfile(path):
        return "file"
    return "other"

# -----------------------------------------------------------------------------
# TREE SOURCE API
# -----------------------------------------------------------------------------

def read_tree_file(path: str) -> List[str]:
    """
    Read an ASCII tree description from disk.

    Accepts UTF-8 with or without a byte order mark and any newline style.

    Args:
        path: File to read.

    Returns:
        List[str]: Lines without trailing newlines.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read().splitlines()


def read_tree_stream(stream: Optional[TextIO] = None) -> List[str]:
    """
    Read an ASCII tree description until the stream closes.

    Args:
        stream: Text stream to consume. Defaults to sys.stdin.

    Returns:
        List[str]: Lines without trailing newlines.
    """
    src = stream if stream is not None else sys.stdin
    text = src.read()
    if text.startswith("\ufeff"):
        text = text[1:]
    return text.splitlines()
