from __future__ import annotations

"""
Configuration Domain Model.

Defines the immutable option set resolved by the interface layer before a
traversal starts. The configuration is threaded explicitly through the
engine; there is no module-level mutable state.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional

from directorytree.domain.constants import (
    DEFAULT_EXCLUDED_NAMES,
    DEFAULT_ROOT_PATH,
    UNLIMITED_DEPTH,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeConfig:
    """
    Fully resolved option set for a single tree rendering.

    Attributes:
        root_path: Directory whose hierarchy is rendered.
        max_depth: Deepest level expanded below the root (-1 means unlimited).
        use_color: Emit ANSI color codes around entry names.
        show_hidden: Include dot-files and OS-hidden entries.
        excluded_names: Directory names never listed (defaults plus user extras).
        dirs_first: Group directories before files when ordering siblings.
    """
    root_path: str = DEFAULT_ROOT_PATH
    max_depth: int = UNLIMITED_DEPTH
    use_color: bool = True
    show_hidden: bool = False
    excluded_names: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXCLUDED_NAMES)
    dirs_first: bool = True

    @property
    def is_depth_limited(self) -> bool:
        return self.max_depth != UNLIMITED_DEPTH

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot, with the exclusion set sorted."""
        data = asdict(self)
        data["excluded_names"] = sorted(self.excluded_names)
        return data

# -----------------------------------------------------------------------------
# FACTORIES
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default raw option dictionary.

    This is the dict-based form consumed by the validator, mirroring what
    the CLI and the interactive prompt produce.

    Returns:
        Dict[str, Any]: Default option values.
    """
    return {
        "root_path": DEFAULT_ROOT_PATH,
        "max_depth": UNLIMITED_DEPTH,
        "use_color": True,
        "show_hidden": False,
        "excluded_names": [],
        "dirs_first": True,
    }


def merge_excluded_names(extra: Optional[Iterable[str]]) -> FrozenSet[str]:
    """
    Extend the default exclusion set with user supplied directory names.

    The defaults are always kept; blank names are discarded.

    Args:
        extra: Additional directory names, or None.

    Returns:
        FrozenSet[str]: Union of the defaults and the cleaned extras.
    """
    names = set(DEFAULT_EXCLUDED_NAMES)
    for name in extra or ():
        cleaned = str(name).strip()
        if cleaned:
            names.add(cleaned)
    added = names - DEFAULT_EXCLUDED_NAMES
    if added:
        logger.debug(f"Exclusion set extended with: {sorted(added)}")
    return frozenset(names)


def build_config(
        root_path: str = DEFAULT_ROOT_PATH,
        max_depth: int = UNLIMITED_DEPTH,
        use_color: bool = True,
        show_hidden: bool = False,
        extra_excluded: Optional[Iterable[str]] = None,
        dirs_first: bool = True,
) -> TreeConfig:
    """Construct a TreeConfig whose exclusion set is merged with the defaults."""
    return TreeConfig(
        root_path=root_path,
        max_depth=max_depth,
        use_color=use_color,
        show_hidden=show_hidden,
        excluded_names=merge_excluded_names(extra_excluded),
        dirs_first=dirs_first,
    )
