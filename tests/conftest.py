from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the per-user data directory (saved config, logs).
3. Shared tree fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME / LOCALAPPDATA to a throwaway directory for every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    return home


@pytest.fixture
def demo_tree_text() -> str:
    """The sample project used throughout the documentation."""
    return (
        "myProject/\n"
        "├── README.md\n"
        "├── src/\n"
        "│   ├── main.js\n"
        "│   └── utils/\n"
        "│       └── helpers.js\n"
        "└── package.json\n"
    )


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'tree2dir.domain.config'.
    """
    return {
        "output_dir": str(tmp_path / "out"),
        "dry_run": False,
        "strict": False,
        "indent_width": 0,
        "strip_comments": True,
        "save_log": False,
    }
