from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted option sources (command line,
interactive prompt) and the traversal engine. Coerces raw values into a
typed, immutable TreeConfig and reports every correction as a warning
instead of aborting the run.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from directorytree.domain.config import TreeConfig, get_default_config, merge_excluded_names
from directorytree.domain.constants import DEFAULT_ROOT_PATH, UNLIMITED_DEPTH

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("true", "1", "yes", "y", "si", "sí", "s", "on")
_FALSE_WORDS = ("false", "0", "no", "n", "off")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[TreeConfig, List[str]]:
    """
    Validate and normalize a raw option dictionary.

    Missing keys take their default value. Malformed values fall back to
    a safe default and produce a warning (or raise in strict mode).

    Args:
        config: Raw option data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[TreeConfig, List[str]]: The resolved configuration and the
                                      list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    # 2. Field Processing & Normalization
    root_path = _as_str(merged.get("root_path"), DEFAULT_ROOT_PATH, "root_path", warnings, strict)
    max_depth = as_depth(merged.get("max_depth"), warnings, strict)
    use_color = _as_bool(merged.get("use_color"), defaults["use_color"], "use_color", warnings, strict)
    show_hidden = _as_bool(merged.get("show_hidden"), defaults["show_hidden"], "show_hidden", warnings, strict)
    extra = _as_list_str(merged.get("excluded_names"), "excluded_names", warnings, strict)
    dirs_first = _as_bool(merged.get("dirs_first"), defaults["dirs_first"], "dirs_first", warnings, strict)

    resolved = TreeConfig(
        root_path=root_path,
        max_depth=max_depth,
        use_color=use_color,
        show_hidden=show_hidden,
        excluded_names=merge_excluded_names(extra),
        dirs_first=dirs_first,
    )
    return resolved, warnings


def as_depth(value: Any, warnings: Optional[List[str]] = None, strict: bool = False) -> int:
    """
    Coerce a depth value into an int, falling back to unlimited.

    Accepts ints and numeric strings. Any non-numeric value, and any
    negative value other than -1, is reported and replaced by -1.

    Args:
        value: Raw depth value.
        warnings: Accumulator for coercion warnings.
        strict: If True, raises ValueError instead of falling back.

    Returns:
        int: Depth limit, or -1 for unlimited.
    """
    sink = warnings if warnings is not None else []
    if value is None or (isinstance(value, str) and not value.strip()):
        return UNLIMITED_DEPTH

    depth: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        depth = value
    elif isinstance(value, str):
        try:
            depth = int(value.strip())
        except ValueError:
            depth = None

    if depth is None or depth < UNLIMITED_DEPTH:
        msg = f"Invalid depth '{value}': expected a non-negative integer or -1."
        if strict:
            raise ValueError(msg)
        sink.append(f"{msg} Using unlimited depth.")
        return UNLIMITED_DEPTH

    return depth


def as_bool(value: Any, fallback: bool, field: str = "value", warnings: Optional[List[str]] = None) -> bool:
    """Public wrapper around the lenient bool coercion used by the prompt."""
    return _as_bool(value, fallback, field, warnings if warnings is not None else [], False)

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
    """Coerce human-friendly keywords and 0/1 numbers into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if not s:
                return fallback
            if s in _TRUE_WORDS:
                return True
            if s in _FALSE_WORDS:
                return False

    msg = f"Invalid field '{field}': expected bool, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback ({fallback}).")
    return fallback


def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return []

    if isinstance(value, str):
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple, set, frozenset)):
        out: List[str] = []
        for item in value:
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}': expected str, received {type(item).__name__}."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return []
