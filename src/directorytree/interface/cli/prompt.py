from __future__ import annotations

"""
Interactive Prompt Mode.

Asks for every option on standard input when the CLI is started without
arguments, and returns them in the same raw dictionary shape produced by
the argument mapper.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TextIO

from directorytree.core.pipeline.stages.validator import as_bool, as_depth
from directorytree.domain.constants import DEFAULT_ROOT_PATH
from directorytree.utils.i18n import i18n

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]


def prompt_for_options(
        input_func: Optional[InputFunc] = None,
        out: Optional[TextIO] = None,
) -> Dict[str, Any]:
    """
    Collect the options interactively, in a fixed order.

    Order: path, max depth, color, show-hidden, extra exclusions. An empty
    answer (or end of input) keeps the default for that option. A
    non-numeric depth prints a notice and selects unlimited depth.

    Args:
        input_func: Line reader, defaults to the builtin input().
        out: Stream for prompts and notices (stdout by default).

    Returns:
        Dict[str, Any]: Raw option overrides.
    """
    ask = input_func or input

    def _ask(key: str) -> str:
        _write(out, i18n.t(key))
        try:
            return ask("").strip()
        except EOFError:
            return ""

    path = _ask("cli.prompts.path")

    raw_depth = _ask("cli.prompts.depth")
    depth_warnings: List[str] = []
    max_depth = as_depth(raw_depth, depth_warnings)
    if depth_warnings:
        logger.debug(depth_warnings[0])
        _write(out, i18n.t("cli.notices.invalid_depth", value=raw_depth))

    use_color = as_bool(_ask("cli.prompts.color"), True, "use_color")
    show_hidden = as_bool(_ask("cli.prompts.show_hidden"), False, "show_hidden")
    extra = [x.strip() for x in _ask("cli.prompts.exclude").split(",") if x.strip()]

    return {
        "root_path": path or DEFAULT_ROOT_PATH,
        "max_depth": max_depth,
        "use_color": use_color,
        "show_hidden": show_hidden,
        "excluded_names": extra,
    }


def _write(out: Optional[TextIO], text: str) -> None:
    print(text, file=out, flush=True)
