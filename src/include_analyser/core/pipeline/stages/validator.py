from __future__ import annotations

"""
Configuration Validation Stage.

Normalizes the configuration dictionary before the run: coerces types,
drops unusable values with a warning and fills missing keys from the
domain defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from include_analyser.domain.config import get_default_config

logger = logging.getLogger(__name__)


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

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
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

    merged["sources_dir"] = _as_str(
        merged.get("sources_dir"), defaults["sources_dir"], "sources_dir", warnings, strict
    )
    for field in ("include_dirs", "extensions"):
        merged[field] = _as_str_list(merged.get(field), defaults[field], field, warnings, strict)
    for field in ("relative_paths", "json_output"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    bad_exts = [e for e in merged["extensions"] if not e.startswith(".")]
    if bad_exts:
        msg = f"Ignoring extensions without a leading dot: {bad_exts}"
        if strict:
            raise TypeError(msg)
        warnings.append(msg)
        merged["extensions"] = [e for e in merged["extensions"] if e.startswith(".")]

    return merged, warnings


# -----------------------------------------------------------------------------
# COERCION HELPERS
# -----------------------------------------------------------------------------

def _as_str(value: Any, default: str, field: str, warnings: List[str], strict: bool) -> str:
    if isinstance(value, str) and value.strip():
        return value
    if value is None or value == "":
        return default
    msg = f"Invalid value for '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg)
    return default


def _as_bool(value: Any, default: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    msg = f"Invalid value for '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg)
    return default


def _as_str_list(
        value: Any,
        default: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    msg = f"Invalid value for '{field}': expected list of str."
    if strict:
        raise TypeError(msg)
    warnings.append(msg)
    return list(default)
