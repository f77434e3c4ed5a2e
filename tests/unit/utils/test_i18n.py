from __future__ import annotations

"""
Unit tests for Internationalization (i18n) consistency.

Ensures that all locale files (en.json, es.json) share the exact
same key structure and dot-notation resolution works as expected.
"""

import json
import os
from typing import Any, Dict, Set

import pytest

from tree2dir.utils.i18n import I18n

LOCALES_DIR = os.path.abspath(os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "..", "..", "..", "src", "tree2dir", "interface", "locales",
))


def _get_flat_keys(d: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Helper to flatten nested dictionary keys into dot-notation sets."""
    keys = set()
    for k, v in d.items():
        new_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys.update(_get_flat_keys(v, new_key))
        else:
            keys.add(new_key)
    return keys


def _load_keys(lang: str) -> Set[str]:
    with open(os.path.join(LOCALES_DIR, f"{lang}.json"), "r", encoding="utf-8") as f:
        return _get_flat_keys(json.load(f))


def test_locales_key_parity() -> None:
    """TC-01: Verify that EN and ES locales have identical keys."""
    en_keys = _load_keys("en")
    es_keys = _load_keys("es")

    assert not en_keys - es_keys, f"Keys present in EN but missing in ES: {en_keys - es_keys}"
    assert not es_keys - en_keys, f"Keys present in ES but missing in EN: {es_keys - en_keys}"


def test_status_keys_presence() -> None:
    """TC-02: Keys built dynamically by the CLI summary exist in all locales."""
    required = [
        f"cli.status.{action}_{noun}"
        for action in ("created", "existing")
        for noun in ("dir", "file")
    ]
    for lang in ("en", "es"):
        keys = _load_keys(lang)
        for key in required:
            assert key in keys, f"Key '{key}' is missing in {lang}.json"


def test_i18n_resolution_logic(tmp_path) -> None:
    """TC-03: Verify dot-notation resolution and interpolation."""
    dummy_content = {
        "test": {
            "hello": "Hello {name}!",
            "simple": "Simple Text"
        }
    }
    (tmp_path / "test_locale.json").write_text(json.dumps(dummy_content), encoding="utf-8")

    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("test_locale")

    assert service.is_loaded
    assert service.locale == "test_locale"
    assert service.t("test.simple") == "Simple Text"
    assert service.t("test.hello", name="World") == "Hello World!"
    assert service.t("missing.key") == "missing.key"
    assert service.t("missing.key", default="Fallback") == "Fallback"
    # A bad placeholder returns the raw template
    assert service.t("test.hello", other="x") == "Hello {name}!"


def test_missing_locale_falls_back_to_keys() -> None:
    service = I18n("xx")
    assert service.is_loaded is False
    assert service.t("cli.status.parsing") == "cli.status.parsing"


@pytest.mark.parametrize("lang, expected", [("en", "Parsing ASCII tree..."), ("es", None)])
def test_bundled_locales_load(lang: str, expected) -> None:
    service = I18n(lang)
    assert service.is_loaded
    text = service.t("cli.status.parsing")
    assert text != "cli.status.parsing"
    if expected:
        assert text == expected


@pytest.mark.parametrize("lang", ["en", "es"])
def test_help_documents_comment_rule_and_saved_options(lang: str) -> None:
    """TC-04: --keep-comments and --save-config help describe their exact behaviour."""
    with open(os.path.join(LOCALES_DIR, f"{lang}.json"), "r", encoding="utf-8") as f:
        help_texts = json.load(f)["cli"]["args"]
    assert "issue #12.md" in help_texts["keep_comments"]
    assert "--dry-run" in help_texts["save"]
