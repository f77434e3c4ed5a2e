from __future__ import annotations

"""
Unit tests for the ASCII Tree Parser.

Verifies:
1. Assembly of connector trees and plain indented trees into a forest.
2. Directory/file classification, including promotion of parents.
3. Comment, blank line and decoration handling.
4. MalformedTreeError and DuplicateEntryError reporting with line numbers.
"""

from typing import List

import pytest

from tree2dir.core.parsing.parser import parse_tree, parse_tree_text
from tree2dir.domain.errors import DuplicateEntryError, MalformedTreeError
from tree2dir.domain.tree_models import NodeKind, TreeNode


def _shape(nodes: List[TreeNode]) -> list:
    """Reduce a forest to nested (name, kind, children) tuples for comparison."""
    return [(n.name, n.kind.value, _shape(n.children)) for n in nodes]

# -----------------------------------------------------------------------------
# STRUCTURE
# -----------------------------------------------------------------------------

def test_parse_reference_example() -> None:
    """The canonical a/ b.txt c/ d.txt example."""
    forest = parse_tree_text("a/\n├── b.txt\n└── c/\n    └── d.txt")

    assert _shape(forest) == [
        ("a", "directory", [
            ("b.txt", "file", []),
            ("c", "directory", [
                ("d.txt", "file", []),
            ]),
        ]),
    ]


def test_parse_demo_project_keeps_source_order(demo_tree_text: str) -> None:
    forest = parse_tree_text(demo_tree_text)

    assert len(forest) == 1
    root = forest[0]
    assert root.name == "myProject"
    assert [c.name for c in root.children] == ["README.md", "src", "package.json"]

    src = root.children[1]
    assert src.is_dir
    assert [c.name for c in src.children] == ["main.js", "utils"]
    assert src.children[1].children[0].name == "helpers.js"


def test_parse_records_line_numbers(demo_tree_text: str) -> None:
    root = parse_tree_text(demo_tree_text)[0]
    assert root.line_number == 1
    assert [n.line_number for n in root.walk()] == [1, 2, 3, 4, 5, 6, 7]


def test_parse_plain_indentation_detects_width() -> None:
    text = "proj/\n  docs/\n    index.md\n  setup.py\n"
    forest = parse_tree_text(text)

    assert _shape(forest) == [
        ("proj", "directory", [
            ("docs", "directory", [("index.md", "file", [])]),
            ("setup.py", "file", []),
        ]),
    ]


def test_parse_ascii_connectors() -> None:
    text = "pkg\n|-- core\n|   `-- engine.py\n`-- README"
    root = parse_tree_text(text)[0]

    assert root.is_dir
    assert [c.name for c in root.children] == ["core", "README"]
    assert root.children[0].children[0].name == "engine.py"


def test_parse_multiple_roots() -> None:
    forest = parse_tree_text("docs/\nsrc/\n└── app.py\nREADME.md")
    assert [n.name for n in forest] == ["docs", "src", "README.md"]
    assert forest[2].kind is NodeKind.FILE


def test_parse_forest_without_root_line() -> None:
    """A diagram made only of connectors yields several roots."""
    forest = parse_tree_text("├── a.txt\n├── lib/\n│   └── x.py\n└── b.txt")
    assert [n.name for n in forest] == ["a.txt", "lib", "b.txt"]
    assert forest[1].children[0].name == "x.py"


def test_parse_dot_root_means_base_directory() -> None:
    forest = parse_tree_text(".\n├── Makefile\n└── src\n    └── main.c")
    assert [n.name for n in forest] == ["Makefile", "src"]
    assert forest[1].is_dir

# -----------------------------------------------------------------------------
# CLASSIFICATION AND DECORATIONS
# -----------------------------------------------------------------------------

def test_trailing_slash_marks_directory() -> None:
    root = parse_tree_text("root/\n├── empty/\n└── file")[0]
    assert root.children[0].kind is NodeKind.DIRECTORY
    assert root.children[0].children == []
    assert root.children[1].kind is NodeKind.FILE


def test_parent_without_slash_is_promoted_to_directory() -> None:
    root = parse_tree_text("project\n└── src\n    └── main.py")[0]
    assert root.kind is NodeKind.DIRECTORY
    assert root.children[0].kind is NodeKind.DIRECTORY
    assert root.children[0].children[0].kind is NodeKind.FILE


def test_comments_blank_lines_and_spacers_are_skipped() -> None:
    text = (
        "# project layout\n"
        "app/\n"
        "│\n"
        "├── config.yml   # settings\n"
        "\n"
        "│   # nothing here\n"
        "└── run.sh\n"
    )
    root = parse_tree_text(text)[0]
    assert [c.name for c in root.children] == ["config.yml", "run.sh"]
    assert root.children[1].line_number == 7


def test_keep_comments_treats_hash_as_name() -> None:
    root = parse_tree_text("app/\n└── #notes", strip_comments=False)[0]
    assert root.children[0].name == "#notes"


def test_icons_and_common_margin_are_stripped() -> None:
    text = "    📂 site\n    ├── 📄 index.html\n    └── 📂 css/\n"
    root = parse_tree_text(text)[0]
    assert root.name == "site"
    assert [c.name for c in root.children] == ["index.html", "css"]
    assert root.children[1].is_dir


def test_hash_inside_name_is_kept() -> None:
    root = parse_tree_text("docs/\n├── issue #12.md\n└── notes.md  # scratch")[0]
    assert [c.name for c in root.children] == ["issue #12.md", "notes.md"]


def test_tree_report_line_is_skipped() -> None:
    text = ".\n├── a.txt\n└── b/\n    └── c.txt\n\n1 directory, 2 files\n"
    forest = parse_tree_text(text)
    assert [n.name for n in forest] == ["a.txt", "b"]


@pytest.mark.parametrize("report", ["3 directories, 7 files", "0 directories", "2 directories, 1 file"])
def test_tree_report_variants_are_skipped(report: str) -> None:
    forest = parse_tree_text(f"pkg/\n└── mod.py\n\n{report}")
    assert [n.name for n in forest] == ["pkg"]


def test_flush_left_root_with_indented_connectors() -> None:
    text = "project/\n  ├── a.txt\n  └── src/\n      └── main.py\n"
    root = parse_tree_text(text)[0]
    assert [c.name for c in root.children] == ["a.txt", "src"]
    assert root.children[1].children[0].name == "main.py"


def test_parse_accepts_line_iterables_with_newlines() -> None:
    lines = ["a/\n", "└── b\r\n"]
    root = parse_tree(lines)[0]
    assert root.children[0].name == "b"


def test_parse_empty_input_returns_empty_forest() -> None:
    assert parse_tree_text("") == []
    assert parse_tree_text("\n# only a comment\n\n") == []

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

def test_depth_jump_raises_malformed_with_line_number() -> None:
    with pytest.raises(MalformedTreeError) as exc:
        parse_tree_text("a/\n│   └── deep.txt")
    assert exc.value.line_number == 2
    assert "Line 2" in str(exc.value)


def test_plain_indent_jump_raises_malformed() -> None:
    with pytest.raises(MalformedTreeError) as exc:
        parse_tree_text("a/\n  b/\n      c.txt", indent_width=2)
    assert exc.value.line_number == 3


def test_misaligned_connector_raises_malformed() -> None:
    with pytest.raises(MalformedTreeError) as exc:
        parse_tree_text("a/\n├── b/\n  └── c")
    assert exc.value.line_number == 3


def test_entry_shallower_than_first_raises_malformed() -> None:
    with pytest.raises(MalformedTreeError) as exc:
        parse_tree_text("├── a\nb")
    assert exc.value.line_number == 2


def test_name_with_separator_raises_malformed() -> None:
    with pytest.raises(MalformedTreeError) as exc:
        parse_tree_text("root/\n└── src/utils/")
    assert "path separator" in exc.value.reason


@pytest.mark.parametrize("name", ["..", "../"])
def test_parent_reference_raises_malformed(name: str) -> None:
    with pytest.raises(MalformedTreeError):
        parse_tree_text(f"root/\n└── {name}")


def test_dot_after_first_entry_raises_malformed() -> None:
    with pytest.raises(MalformedTreeError):
        parse_tree_text("a/\n.")


def test_duplicate_siblings_raise() -> None:
    with pytest.raises(DuplicateEntryError) as exc:
        parse_tree_text("a/\n├── x.txt\n└── x.txt")
    err = exc.value
    assert err.name == "x.txt"
    assert err.line_number == 3
    assert err.first_line_number == 2
    assert err.parent == "a"


def test_duplicate_with_conflicting_kind_raises() -> None:
    with pytest.raises(DuplicateEntryError):
        parse_tree_text("a/\n├── build\n└── build/")


def test_duplicate_roots_raise() -> None:
    with pytest.raises(DuplicateEntryError) as exc:
        parse_tree_text("docs/\ndocs/")
    assert exc.value.parent == ""


def test_same_name_in_different_directories_is_allowed() -> None:
    forest = parse_tree_text("a/\n├── x/\n│   └── __init__.py\n└── y/\n    └── __init__.py")
    assert len(list(forest[0].walk())) == 5
