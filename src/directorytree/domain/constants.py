from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the drawing glyphs, terminal color codes,
default exclusion rules and file classification tables shared by the
traversal engine and the renderer.
"""

from typing import FrozenSet

APP_VERSION = "1.1.0"
DEFAULT_ROOT_PATH = "."
UNLIMITED_DEPTH = -1

# -----------------------------------------------------------------------------
# TREE GLYPHS
# -----------------------------------------------------------------------------
BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL_SEGMENT = "│   "
BLANK_SEGMENT = "    "

SYMLINK_ANNOTATION = " (symbolic link)"
ACCESS_ERROR_LABEL = "Error accessing: "

# -----------------------------------------------------------------------------
# ANSI COLOR CODES
# -----------------------------------------------------------------------------
COLOR_RESET = "\033[0m"
COLOR_DIRECTORY = "\033[1;34m"
COLOR_EXECUTABLE = "\033[1;32m"
COLOR_IMAGE = "\033[35m"
COLOR_TEXT = "\033[36m"

# -----------------------------------------------------------------------------
# FILTERING AND CLASSIFICATION TABLES
# -----------------------------------------------------------------------------
DEFAULT_EXCLUDED_NAMES: FrozenSet[str] = frozenset({
    "node_modules", "target", ".git", "build", "dist",
})

EXECUTABLE_SUFFIXES = (".exe", ".bat", ".sh")

IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({
    "jpg", "jpeg", "png", "gif", "bmp", "svg",
})

TEXT_EXTENSIONS: FrozenSet[str] = frozenset({
    "txt", "md", "java", "c", "cpp", "py", "js", "html", "css", "xml", "json",
})
