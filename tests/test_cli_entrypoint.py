from __future__ import annotations

import importlib

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("slime_finder.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_chunk_command_reports_classification() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from slime_finder.main import app
    from slime_finder.world import is_slime_chunk

    result = CliRunner().invoke(app, ["chunk", "--seed", "0", "--x", "3", "--z", "-4"])

    assert result.exit_code == 0
    assert "slime_chunk" in result.output
    assert str(is_slime_chunk(0, 3, -4)) in result.output


def test_show_section_draws_one_line_per_row() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from slime_finder.main import app

    result = CliRunner().invoke(app, ["show-section", "--seed", "1", "--x", "-8", "--z", "8", "--size", "6"])

    assert result.exit_code == 0
    assert len(result.output.rstrip("\n").split("\n")) == 6


def test_search_command_prints_ranked_results() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from slime_finder.main import app

    args = ["search", "--seed", "0", "--x0", "0", "--z0", "0", "--x1", "40", "--z1", "40"]
    args += ["--threshold", "1", "--mask-width", "1", "--mask-height", "1", "--workers", "2", "--limit", "3"]
    result = CliRunner().invoke(app, args)

    assert result.exit_code == 0
    assert "total_results" in result.output


def test_search_command_rejects_oversized_mask() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from slime_finder.main import app

    args = ["search", "--seed", "0", "--x0", "0", "--z0", "0", "--x1", "10", "--z1", "10"]
    args += ["--threshold", "1", "--mask-width", "200", "--mask-height", "1"]
    result = CliRunner().invoke(app, args)

    assert result.exit_code != 0


def test_unknown_log_level_is_rejected() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from slime_finder.main import app

    result = CliRunner().invoke(app, ["--log-level", "loud", "show-config"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
