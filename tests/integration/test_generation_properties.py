from __future__ import annotations

"""
Integration tests for whole-run guarantees.

Verifies, over a set of representative diagrams, that:
1. A dry run lists exactly the paths a real run creates.
2. Running twice changes nothing and creates nothing new.
3. A malformed diagram leaves the output directory untouched.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Set

import pytest

from tree2dir.core.pipeline.engine import run_generation
from tree2dir.core.pipeline.validator import validate_config

DIAGRAMS = {
    "box": "a/\n├── b.txt\n└── c/\n    └── d.txt\n",
    "ascii": "proj\n|-- src\n|   |-- app.py\n|   `-- lib/\n`-- setup.cfg\n",
    "indented": "site\n  css/\n    main.css\n  index.html\n",
    "forest": "├── Makefile\n├── docs/\n│   └── index.md\n└── LICENSE\n",
    "dot_root": ".\n├── .gitignore\n└── pkg/\n    ├── __init__.py\n    └── core.py\n",
    "commented": "# layout\nroot/    # top\n│\n├── notes.md  # keep\n└── empty/\n",
}


def _cfg(out: Path, **extra: Any) -> Dict[str, Any]:
    clean, _ = validate_config({"output_dir": str(out), **extra})
    return clean


def _disk_paths(base: Path) -> Set[str]:
    found: Set[str] = set()
    for dirpath, dirnames, filenames in os.walk(base):
        for name in dirnames + filenames:
            found.add(os.path.relpath(os.path.join(dirpath, name), base))
    return found


@pytest.mark.parametrize("name", sorted(DIAGRAMS))
def test_dry_run_matches_real_run(tmp_path: Path, name: str) -> None:
    lines: List[str] = DIAGRAMS[name].splitlines()
    out = tmp_path / "out"

    preview = run_generation(lines, _cfg(out, dry_run=True))
    assert preview.ok, preview.error
    assert not out.exists()

    real = run_generation(lines, _cfg(out))
    assert real.ok, real.error

    planned = {e["rel_path"] for e in preview.entries}
    created = {e["rel_path"] for e in real.entries if e["status"] == "created"}
    assert planned == created == _disk_paths(out)


@pytest.mark.parametrize("name", sorted(DIAGRAMS))
def test_second_run_is_a_no_op(tmp_path: Path, name: str) -> None:
    lines = DIAGRAMS[name].splitlines()
    out = tmp_path / "out"

    run_generation(lines, _cfg(out))
    before = _disk_paths(out)

    again = run_generation(lines, _cfg(out))

    assert again.ok
    assert again.summary["created"] == 0
    assert again.summary["existing"] == len(again.entries)
    assert _disk_paths(out) == before


@pytest.mark.parametrize(
    "text",
    [
        "a/\n│   └── too_deep\n",
        "a/\n├── x\n└── x\n",
        "a/\n└── ../escape\n",
    ],
)
def test_malformed_input_touches_nothing(tmp_path: Path, text: str) -> None:
    out = tmp_path / "out"

    result = run_generation(text.splitlines(), _cfg(out))

    assert result.ok is False
    assert result.error_kind == "parse"
    assert not out.exists()
