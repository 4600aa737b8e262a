from __future__ import annotations

"""
Directory Tree Data Models.

Provides the filesystem entry snapshot consumed by the traversal engine,
the per-run counters, and the result object handed back to the interface
layer together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    Represents a single entry listed from a directory.

    Attributes:
        name: Base name of the entry.
        path: Absolute path of the entry (not resolved through links).
        is_dir: True for directories, including links that point to one.
        is_hidden: OS-level hidden flag (dot-files are handled by the filter).
        is_executable: Platform executable bit for regular files.
        is_symlink: True when the entry itself is a symbolic link.
    """
    name: str
    path: str
    is_dir: bool = False
    is_hidden: bool = False
    is_executable: bool = False
    is_symlink: bool = False


@dataclass
class TreeStats:
    """Counters accumulated while walking a tree."""
    directories: int = 0
    files: int = 0
    links: int = 0
    errors: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "directories": self.directories,
            "files": self.files,
            "links": self.links,
            "errors": self.errors,
        }

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of a complete tree rendering.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Absolute root directory that was processed.
        header: One-line description of the effective options.
        lines: Root name followed by the rendered tree lines.
        stats: Counters collected during the walk.
    """
    ok: bool
    error: str
    base_path: str
    header: str = ""
    lines: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, base_path: str) -> TreeResult:
    """Create a failed result carrying no tree output."""
    return TreeResult(ok=False, error=error, base_path=base_path)


def create_success_result(
        base_path: str,
        header: str,
        lines: List[str],
        stats: Optional[TreeStats] = None,
) -> TreeResult:
    """
    Create a successful result instance.

    Args:
        base_path: Absolute root directory.
        header: Summary line of the effective options.
        lines: Rendered output lines, root name first.
        stats: Walk counters.

    Returns:
        TreeResult: An immutable success result object.
    """
    return TreeResult(
        ok=True,
        error="",
        base_path=base_path,
        header=header,
        lines=list(lines),
        stats=(stats or TreeStats()).as_dict(),
    )
