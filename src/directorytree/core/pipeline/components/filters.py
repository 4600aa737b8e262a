from __future__ import annotations

"""
Entry Filtering and Ordering Engine.

Decides which directory entries are visible at each level of the tree
(hidden-entry rule and exclusion-set rule) and defines the deterministic
display order: directories first, then case-insensitive name order.
"""

from typing import Iterable, List

from directorytree.domain.config import TreeConfig
from directorytree.domain.tree_models import DirectoryEntry

# -----------------------------------------------------------------------------
# VISIBILITY RULES
# -----------------------------------------------------------------------------

def is_hidden(entry: DirectoryEntry) -> bool:
    """
    Classify an entry as hidden.

    An entry is hidden when the OS flags it as such or when its name
    starts with a dot.

    Args:
        entry: Directory entry to evaluate.

    Returns:
        bool: True if the entry is hidden.
    """
    return entry.is_hidden or entry.name.startswith(".")


def is_excluded(entry: DirectoryEntry, excluded_names: Iterable[str]) -> bool:
    """
    Verify if an entry is an excluded directory.

    The exclusion set only applies to directories; a regular file named
    like an excluded directory stays visible.
    """
    return entry.is_dir and entry.name in excluded_names


def is_visible(entry: DirectoryEntry, config: TreeConfig) -> bool:
    """
    Apply every visibility rule to a single entry.

    Args:
        entry: Directory entry to evaluate.
        config: Active tree configuration.

    Returns:
        bool: True if the entry must be rendered.
    """
    if not config.show_hidden and is_hidden(entry):
        return False
    return not is_excluded(entry, config.excluded_names)

# -----------------------------------------------------------------------------
# ORDERING AND PUBLIC API
# -----------------------------------------------------------------------------

def sort_entries(entries: Iterable[DirectoryEntry], dirs_first: bool = True) -> List[DirectoryEntry]:
    """
    Order entries with directories first, then by case-insensitive name.

    The sort is stable, so names that compare equal keep their listing order.
    With dirs_first disabled, directories and files are interleaved by name.
    """
    if not dirs_first:
        return sorted(entries, key=lambda e: e.name.lower())
    return sorted(entries, key=lambda e: (not e.is_dir, e.name.lower()))


def filter_entries(entries: Iterable[DirectoryEntry], config: TreeConfig) -> List[DirectoryEntry]:
    """
    Select and order the visible subset of a directory listing.

    Args:
        entries: Raw listing in filesystem order.
        config: Active tree configuration.

    Returns:
        List[DirectoryEntry]: Visible entries in display order.
    """
    return sort_entries((e for e in entries if is_visible(e, config)), config.dirs_first)
