from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before the engine runs. Handles type coercion, path normalization, and
default value injection.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from tree2dir.domain.config import get_default_config
from tree2dir.infra.fs import normalize_path

logger = logging.getLogger(__name__)

MAX_INDENT_WIDTH = 16

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (CLI flags, the persisted JSON file) into
    strictly typed parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("dry_run", "strict", "strip_comments", "save_log"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["indent_width"] = _as_indent(merged.get("indent_width"), warnings, strict)

    output_dir = _as_str(merged.get("output_dir"), defaults["output_dir"], "output_dir", warnings, strict)
    merged["output_dir"] = normalize_path(output_dir, fallback=os.getcwd())

    unknown = sorted(k for k in merged if k not in defaults)
    for k in unknown:
        warnings.append(f"Unknown config key '{k}' ignored.")
        del merged[k]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_indent(value: Any, warnings: List[str], strict: bool) -> int:
    """Accept 0 (auto) or a positive column count up to MAX_INDENT_WIDTH."""
    if value is None:
        return 0
    if isinstance(value, str) and not strict and value.strip().isdigit():
        warnings.append(f"Field 'indent_width' converted from '{value}' to int.")
        value = int(value.strip())

    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid field 'indent_width': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using auto-detection.")
        return 0

    if not 0 <= value <= MAX_INDENT_WIDTH:
        msg = f"Invalid field 'indent_width': {value} is outside 0..{MAX_INDENT_WIDTH}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using auto-detection.")
        return 0
    return value
