from __future__ import annotations

"""
Directory Tree Generator.

Depth-first traversal engine. Walks a directory hierarchy through the
FileSystem interface, applies the entry filter at every level, detects
cycles introduced by symbolic links using canonical paths, enforces the
depth limit and emits one rendered line per visible entry.

The walk uses an explicit work-stack instead of interpreter recursion,
so very deep hierarchies cannot exhaust the call stack.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set

from directorytree.core.analysis.tree_renderer import (
    extend_prefix,
    render_access_error,
    render_entry,
    render_link,
    render_root,
)
from directorytree.core.pipeline.components.filters import filter_entries
from directorytree.domain.config import TreeConfig
from directorytree.domain.errors import InvalidRootError, NodeAccessError
from directorytree.domain.tree_models import DirectoryEntry, TreeStats
from directorytree.infra.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """Pending siblings of one directory level."""
    entries: List[DirectoryEntry]
    prefix: str
    depth: int
    index: int = 0

# -----------------------------------------------------------------------------
# TRAVERSAL ENGINE
# -----------------------------------------------------------------------------

class TreeWalker:
    """
    Stateful walker for a single configuration.

    The visited set is private to one call of walk(): it is reset at the
    start of every walk and never shared. A canonical path is recorded
    before its directory is listed and never removed afterwards.
    """

    def __init__(self, config: TreeConfig, fs: Optional[FileSystem] = None):
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.stats = TreeStats()
        self._visited: Set[str] = set()
        self._lines: List[str] = []

    def walk(self, root: DirectoryEntry) -> List[str]:
        """
        Render every visible descendant of 'root'.

        The root line itself is not included; see generate_directory_tree.

        Args:
            root: Directory to start from.

        Returns:
            List[str]: Rendered lines in display order.

        Raises:
            InvalidRootError: If the root itself cannot be listed.
        """
        self._visited = set()
        self._lines = []
        self.stats = TreeStats()

        first = self._open(root, prefix="", depth=0)
        stack: List[_Frame] = [first] if first else []

        while stack:
            frame = stack[-1]
            if frame.index >= len(frame.entries):
                stack.pop()
                continue

            entry = frame.entries[frame.index]
            frame.index += 1
            is_last = frame.index == len(frame.entries)

            child = self._visit(entry, frame, is_last)
            if child:
                stack.append(child)

        return self._lines

    # -------------------------------------------------------------------------
    # INTERNAL STEPS
    # -------------------------------------------------------------------------

    def _visit(self, entry: DirectoryEntry, frame: _Frame, is_last: bool) -> Optional[_Frame]:
        """Emit the line for one entry and open its level when it must be expanded."""
        use_color = self.config.use_color

        if not entry.is_dir:
            self.stats.files += 1
            self._lines.append(render_entry(entry, frame.prefix, is_last, use_color))
            return None

        child_depth = frame.depth + 1
        if entry.is_symlink and not self._beyond_depth(child_depth) and self._is_visited(entry):
            # Cycle: reported, never expanded. A real directory is always
            # expanded; only a link can lead back into the visited set.
            logger.debug(f"Link back to visited directory: {entry.path}")
            self.stats.links += 1
            self._lines.append(render_link(entry, frame.prefix, is_last, use_color))
            return None

        self.stats.directories += 1
        self._lines.append(render_entry(entry, frame.prefix, is_last, use_color))
        return self._open(entry, extend_prefix(frame.prefix, is_last), child_depth)

    def _open(self, directory: DirectoryEntry, prefix: str, depth: int) -> Optional[_Frame]:
        """
        List and filter one directory level.

        Returns None when nothing has to be walked: the depth limit was
        reached or the listing failed (in which case an error line is emitted).
        """
        if self._beyond_depth(depth):
            return None

        self._visited.add(self.fs.canonical_path(directory.path))

        try:
            raw_entries = self.fs.list_entries(directory.path)
        except NodeAccessError as e:
            if depth == 0:
                raise InvalidRootError(directory.path, "cannot be listed") from e
            logger.warning(f"Skipping unreadable directory: {directory.path}")
            self.stats.errors += 1
            self._lines.append(render_access_error(directory, prefix))
            return None

        visible = filter_entries(raw_entries, self.config)
        logger.debug(f"{directory.path}: {len(visible)} of {len(raw_entries)} entries visible")
        if not visible:
            return None
        return _Frame(entries=visible, prefix=prefix, depth=depth)

    def _beyond_depth(self, depth: int) -> bool:
        return self.config.is_depth_limited and depth > self.config.max_depth

    def _is_visited(self, entry: DirectoryEntry) -> bool:
        return self.fs.canonical_path(entry.path) in self._visited

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        config: TreeConfig,
        fs: Optional[FileSystem] = None,
) -> List[str]:
    """
    Generate the text lines of the tree rooted at config.root_path.

    The first line is the root name, followed by one line per visible
    descendant. The root is assumed to be a valid directory; callers that
    need validation use directorytree.core.pipeline.engine.run_tree.

    Args:
        config: Resolved tree configuration.
        fs: Filesystem implementation (local disk when omitted).

    Returns:
        List[str]: Root line followed by the rendered tree.

    Raises:
        InvalidRootError: If the root cannot be listed.
    """
    walker = TreeWalker(config, fs)
    root = walker.fs.entry_for(config.root_path)

    logger.info(f"Generating directory tree for: {config.root_path}")
    lines = [render_root(root, config.use_color)]
    lines.extend(walker.walk(root))

    return lines
