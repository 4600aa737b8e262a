from __future__ import annotations

"""
Tree Renderer.

Converts a single traversal step (entry, prefix, position among siblings)
into one visual line. Handles connector selection and ANSI colorization
of the entry name; prefixes and connectors are never colorized.
"""

import os
from typing import Optional

from directorytree.domain.constants import (
    ACCESS_ERROR_LABEL,
    BLANK_SEGMENT,
    BRANCH,
    COLOR_DIRECTORY,
    COLOR_EXECUTABLE,
    COLOR_IMAGE,
    COLOR_RESET,
    COLOR_TEXT,
    EXECUTABLE_SUFFIXES,
    IMAGE_EXTENSIONS,
    LAST_BRANCH,
    SYMLINK_ANNOTATION,
    TEXT_EXTENSIONS,
    VERTICAL_SEGMENT,
)
from directorytree.domain.tree_models import DirectoryEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def connector_for(is_last: bool) -> str:
    """Return the last-branch glyph for the final sibling, the branch glyph otherwise."""
    return LAST_BRANCH if is_last else BRANCH


def extend_prefix(prefix: str, is_last: bool) -> str:
    """
    Build the prefix for the children of an entry.

    A vertical bar is carried down while the entry still has siblings
    below it; a blank segment once it was the last one.
    """
    return prefix + (BLANK_SEGMENT if is_last else VERTICAL_SEGMENT)


def pick_color(entry: DirectoryEntry) -> Optional[str]:
    """
    Select the color code for an entry name.

    Rules are evaluated in priority order and the first match wins:
    directory, executable, image extension, text/code extension.

    Args:
        entry: Entry to classify.

    Returns:
        Optional[str]: ANSI color code, or None for a plain name.
    """
    if entry.is_dir:
        return COLOR_DIRECTORY

    lowered = entry.name.lower()
    if entry.is_executable or lowered.endswith(EXECUTABLE_SUFFIXES):
        return COLOR_EXECUTABLE

    ext = os.path.splitext(lowered)[1].lstrip(".")
    if ext in IMAGE_EXTENSIONS:
        return COLOR_IMAGE
    if ext in TEXT_EXTENSIONS:
        return COLOR_TEXT

    return None


def format_name(entry: DirectoryEntry, use_color: bool) -> str:
    """Return the entry name, wrapped in its color and a reset code when enabled."""
    if not use_color:
        return entry.name
    color = pick_color(entry)
    if color is None:
        return entry.name
    return f"{color}{entry.name}{COLOR_RESET}"


def render_entry(
        entry: DirectoryEntry,
        prefix: str,
        is_last: bool,
        use_color: bool = False,
        annotation: str = "",
) -> str:
    """
    Render one line of the tree.

    Args:
        entry: Entry being displayed.
        prefix: Accumulated indentation of the current level.
        is_last: Whether the entry is the final sibling.
        use_color: Enable ANSI colorization of the name.
        annotation: Optional trailing text (e.g. the symbolic link marker).

    Returns:
        str: prefix + connector + (colored) name + annotation.
    """
    return f"{prefix}{connector_for(is_last)}{format_name(entry, use_color)}{annotation}"


def render_link(entry: DirectoryEntry, prefix: str, is_last: bool, use_color: bool = False) -> str:
    """Render a directory reached again through a link, which is never expanded."""
    return render_entry(entry, prefix, is_last, use_color, annotation=SYMLINK_ANNOTATION)


def render_access_error(entry: DirectoryEntry, prefix: str) -> str:
    """Render the inline annotation for a directory that could not be listed."""
    return f"{prefix}{LAST_BRANCH}{ACCESS_ERROR_LABEL}{entry.name}"


def render_root(entry: DirectoryEntry, use_color: bool = False) -> str:
    """Render the root name line, colored with the directory rule when enabled."""
    return format_name(entry, use_color)
