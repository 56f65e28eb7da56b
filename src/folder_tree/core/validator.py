from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before it reaches the renderers. Handles type coercion and default value
injection, collecting human-readable warnings along the way.
"""

import logging
from typing import Any, Dict, List, Tuple

from folder_tree.domain.config import get_default_config
from folder_tree.domain.constants import RENDER_STYLES

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")

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
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a value outside its allowed range.
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

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown field '{key}' ignored.")
        merged.pop(key, None)

    merged["indent_width"] = _as_indent(
        merged.get("indent_width"), defaults["indent_width"], warnings, strict
    )
    merged["style"] = _as_choice(
        merged.get("style"), defaults["style"], RENDER_STYLES, "style", warnings, strict
    )
    merged["include_photo"] = _as_bool(
        merged.get("include_photo"), defaults["include_photo"], "include_photo", warnings, strict
    )
    level = merged.get("log_level")
    if isinstance(level, str):
        level = level.strip().upper()
    merged["log_level"] = _as_choice(
        level, defaults["log_level"], _LOG_LEVELS, "log_level", warnings, strict
    )

    for w in warnings:
        logger.debug(f"Config warning: {w}")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_indent(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """Accept non-negative integers, coercing numeric strings when lenient."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        s = value.strip()
        if s.isdigit():
            warnings.append(f"Field 'indent_width' converted from '{value}' to {int(s)}.")
            return int(s)

    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid field 'indent_width': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if value < 0:
        msg = f"Invalid field 'indent_width': must be >= 0, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return value


def _as_choice(
        value: Any,
        fallback: str,
        choices: Tuple[str, ...],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Restrict a string field to a closed set of values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value in choices:
        return value

    msg = f"Invalid field '{field}': expected one of {', '.join(choices)}, received {value!r}."
    if strict:
        raise ValueError(msg)
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
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
