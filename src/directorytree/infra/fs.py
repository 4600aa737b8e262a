from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the small capability interface the traversal engine depends on
(list a directory, canonicalize a path, check directory-ness) and its
concrete implementation over the 'os' module. Tests substitute an
in-memory implementation of the same interface.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from typing import List, Optional

from directorytree.domain.errors import NodeAccessError
from directorytree.domain.tree_models import DirectoryEntry

logger = logging.getLogger(__name__)

# Windows attribute bit; absent from 'stat' on some interpreters
_FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)

# -----------------------------------------------------------------------------
# CAPABILITY INTERFACE
# -----------------------------------------------------------------------------

class FileSystem(ABC):
    """
    Abstract read-only view of a filesystem.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if 'path' exists and is a directory (links followed)."""
        pass

    @abstractmethod
    def canonical_path(self, path: str) -> str:
        """
        Resolve a path to its canonical form.

        All symbolic links and relative segments are eliminated. The result
        is the identity key used for cycle detection.
        """
        pass

    @abstractmethod
    def list_entries(self, path: str) -> List[DirectoryEntry]:
        """
        List the direct entries of a directory.

        Raises:
            NodeAccessError: If the directory cannot be read.
        """
        pass

    def entry_for(self, path: str) -> DirectoryEntry:
        """Build an entry describing 'path' itself (used for the root)."""
        name = display_name(os.path.basename(os.path.normpath(path)) or path)
        return DirectoryEntry(name=name, path=path, is_dir=self.is_directory(path))

# -----------------------------------------------------------------------------
# LOCAL DISK IMPLEMENTATION
# -----------------------------------------------------------------------------

class LocalFileSystem(FileSystem):
    """FileSystem backed by the host operating system."""

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def canonical_path(self, path: str) -> str:
        return os.path.realpath(path)

    def list_entries(self, path: str) -> List[DirectoryEntry]:
        entries: List[DirectoryEntry] = []
        try:
            # Handle is released on every exit path, including errors mid-iteration
            with os.scandir(path) as it:
                for de in it:
                    entries.append(self._to_entry(de))
        except OSError as e:
            logger.debug(f"Listing failed for '{path}': {e}")
            raise NodeAccessError(path, e) from e
        return entries

    def _to_entry(self, de: os.DirEntry) -> DirectoryEntry:
        """Snapshot an os.DirEntry, tolerating entries that vanish while listed."""
        try:
            is_symlink = de.is_symlink()
            is_dir = de.is_dir(follow_symlinks=True)
        except OSError:
            is_symlink, is_dir = False, False

        return DirectoryEntry(
            name=display_name(de.name),
            path=os.path.abspath(de.path),
            is_dir=is_dir,
            is_hidden=_has_hidden_attribute(de),
            is_executable=(not is_dir) and _is_executable(de.path),
            is_symlink=is_symlink,
        )

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def display_name(name: str) -> str:
    """
    Make a filesystem name safe to print.

    Undecodable bytes that the OS layer surrogate-escaped (POSIX) and lone
    surrogates (Windows) are replaced by U+FFFD; any other name is
    returned unchanged.

    Args:
        name: Name or path as returned by the 'os' module.

    Returns:
        str: Text encodable as UTF-8.
    """
    try:
        name.encode("utf-8")
        return name
    except UnicodeEncodeError:
        pass
    try:
        raw = name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = name.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _has_hidden_attribute(de: os.DirEntry) -> bool:
    """Check the Windows hidden attribute; always False on POSIX."""
    if os.name != "nt":
        return False
    try:
        attrs = getattr(de.stat(follow_symlinks=False), "st_file_attributes", 0)
    except OSError:
        return False
    return bool(attrs & _FILE_ATTRIBUTE_HIDDEN)


def _is_executable(path: str) -> bool:
    """Check the platform executable bit for a regular file."""
    if os.name == "nt":
        return False
    return os.access(path, os.X_OK)
