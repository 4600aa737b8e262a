from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete tree rendering:
1. Normalizes and validates the root path.
2. Builds the header describing the effective options.
3. Runs the traversal engine from a fresh state.
4. Packages lines and statistics into a TreeResult.

Invalid roots never raise out of this module; they are reported through
a failed TreeResult so the interface layer decides how to present them.
"""

import logging
import os
from dataclasses import replace
from typing import Optional

from directorytree.core.analysis.tree_generator import TreeWalker
from directorytree.core.analysis.tree_renderer import render_root
from directorytree.domain.config import TreeConfig
from directorytree.domain.errors import InvalidRootError
from directorytree.domain.tree_models import (
    TreeResult,
    create_error_result,
    create_success_result,
)
from directorytree.infra.fs import FileSystem, LocalFileSystem, display_name, normalize_path
from directorytree.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run_tree(config: TreeConfig, fs: Optional[FileSystem] = None) -> TreeResult:
    """
    Execute a full tree rendering for the given configuration.

    Args:
        config: Resolved tree configuration.
        fs: Filesystem implementation (local disk when omitted).

    Returns:
        TreeResult: Status, header, rendered lines and walk statistics.
    """
    fs = fs or LocalFileSystem()

    # -------------------------------------------------------------------------
    # 1) Root Validation
    # -------------------------------------------------------------------------
    base_path = normalize_path(config.root_path, os.getcwd())
    if not fs.is_directory(base_path):
        msg = str(InvalidRootError(base_path))
        logger.debug(msg)
        return create_error_result(msg, base_path)

    cfg = replace(config, root_path=base_path)
    header = build_header(cfg)

    # -------------------------------------------------------------------------
    # 2) Traversal
    # -------------------------------------------------------------------------
    walker = TreeWalker(cfg, fs)
    root = fs.entry_for(base_path)
    logger.info(f"Generating directory tree for: {base_path}")

    try:
        body = walker.walk(root)
    except InvalidRootError as e:
        logger.debug(f"Root listing failed: {e}")
        return create_error_result(str(e), base_path)

    lines = [render_root(root, cfg.use_color)] + body
    logger.debug(f"Tree complete: {walker.stats.as_dict()}")

    return create_success_result(base_path, header, lines, walker.stats)


def build_header(config: TreeConfig) -> str:
    """
    Build the one-line description printed above the tree.

    Args:
        config: Configuration whose root_path is already absolute.

    Returns:
        str: Header naming the root, the depth limit and the exclusion set.
    """
    return i18n.t(
        "tree.header",
        default="Directory Tree for: {path} (max depth: {depth}, excluding: {excluded})",
        path=display_name(config.root_path),
        depth=config.max_depth if config.is_depth_limited else i18n.t("tree.unlimited", default="unlimited"),
        excluded=", ".join(sorted(config.excluded_names)),
    )


def format_summary(stats: dict) -> str:
    """Render the Unix tree style footer: 'N directories, M files'."""
    dirs = stats.get("directories", 0)
    files = stats.get("files", 0)
    return i18n.t(
        "tree.summary",
        default="{dirs} {dir_word}, {files} {file_word}",
        dirs=dirs,
        dir_word=i18n.t("tree.words.directory" if dirs == 1 else "tree.words.directories",
                        default="directory" if dirs == 1 else "directories"),
        files=files,
        file_word=i18n.t("tree.words.file" if files == 1 else "tree.words.files",
                         default="file" if files == 1 else "files"),
    )
