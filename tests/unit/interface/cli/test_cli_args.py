from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to raw option keys.
2. CSV string parsing logic.
3. The '-h' switch selecting hidden entries instead of help.
"""

import pytest

from directorytree.interface.cli.args import args_to_overrides, build_parser, flags_missing_value


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    args, _ = parser.parse_known_args(arg_list)
    return args


def test_cli_short_flags_mapping():
    args = parse_args(["-p", "/srv/app", "-d", "2", "-c", "false", "-h", "-e", "venv,.tox"])
    overrides = args_to_overrides(args)

    assert overrides["root_path"] == "/srv/app"
    assert overrides["max_depth"] == "2"
    assert overrides["use_color"] == "false"
    assert overrides["show_hidden"] is True
    assert overrides["excluded_names"] == ["venv", ".tox"]


def test_cli_long_flags_mapping():
    args = parse_args([
        "--path", "docs",
        "--depth", "abc",
        "--color", "no",
        "--show-hidden",
        "--exclude", "a, b ,,c",
        "--no-dirs-first",
    ])
    overrides = args_to_overrides(args)

    assert overrides["root_path"] == "docs"
    assert overrides["max_depth"] == "abc"
    assert overrides["use_color"] == "no"
    assert overrides["show_hidden"] is True
    assert overrides["excluded_names"] == ["a", "b", "c"]
    assert overrides["dirs_first"] is False


def test_color_flag_without_value_enables_color():
    overrides = args_to_overrides(parse_args(["-c"]))
    assert overrides["use_color"] == "true"


def test_cli_defaults_are_explicit_in_overrides():
    """Unset options map to None so the validator injects the defaults."""
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert overrides["root_path"] is None
    assert overrides["max_depth"] is None
    assert overrides["use_color"] is None
    assert overrides["excluded_names"] is None
    assert "show_hidden" not in overrides
    assert "dirs_first" not in overrides


def test_unknown_flags_are_returned_not_fatal():
    parser = build_parser()
    args, unknown = parser.parse_known_args(["-p", ".", "--sideways"])

    assert args.root_path == "."
    assert unknown == ["--sideways"]


def test_help_flag_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--help"])

    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "usage: directorytree" in out
    assert "--show-hidden" in out


def test_value_flags_tolerate_missing_value():
    """'-d' and '-e' without a value map to unset and are reported."""
    args = parse_args(["-p", "/srv/app", "-e", "-d"])
    overrides = args_to_overrides(args)

    assert overrides["root_path"] == "/srv/app"
    assert overrides["max_depth"] is None
    assert overrides["excluded_names"] is None
    assert flags_missing_value(args) == ["--depth", "--exclude"]


def test_negative_depth_value_is_still_consumed():
    args = parse_args(["-d", "-1"])

    assert args_to_overrides(args)["max_depth"] == "-1"
    assert flags_missing_value(args) == []
