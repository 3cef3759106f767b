from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from collections_showcase.__main__ import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _small_settings(settings_env):
    settings_env(
        LARGE_INPUT_SIZE="1000",
        LOG_LEVEL="WARNING",
        SHOWCASE_SECTIONS=None,
        CHUNK_SIZE=None,
        WINDOW_SIZE=None,
        WINDOW_STEP=None,
        WINDOW_PARTIAL=None,
        TAKE_COUNT=None,
    )


def test_sections_lists_names():
    result = runner.invoke(app, ["sections"])
    assert result.exit_code == 0
    assert result.stdout.split() == [
        "collections",
        "advanced-collections",
        "delegation",
        "generics",
        "sealed-classes",
        "inline-values",
        "dsl-builders",
        "reflection",
    ]


def test_demo_single_section():
    result = runner.invoke(app, ["demo", "--section", "dsl-builders"])
    assert result.exit_code == 0
    assert "<html><head><title>My Page</title></head>" in result.stdout
    assert "=== Collections ===" not in result.stdout


def test_demo_sections_from_env(settings_env):
    settings_env(SHOWCASE_SECTIONS="generics")
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "=== Generics and Type Safety ===" in result.stdout
    assert "=== DSL Builders ===" not in result.stdout


def test_demo_unknown_section_fails():
    result = runner.invoke(app, ["demo", "-s", "missing"])
    assert result.exit_code == 1


@pytest.mark.parametrize(
    "args,expected",
    [
        (["chunk", "1", "2", "3", "4", "5", "6", "7"], [[1, 2, 3], [4, 5, 6], [7]]),
        (["window", "1", "2", "3", "4", "5", "6", "7"], [[1, 2, 3], [3, 4, 5], [5, 6, 7]]),
        (["window", "1", "2", "3", "4", "--size", "2", "--step", "3", "--partial"], [[1, 2], [4]]),
        (["distinct-sorted", "3", "1", "2", "3", "4", "2"], [1, 2, 3, 4]),
        (["group-parity", "1", "2", "3", "4", "5"], {"odd": [1, 3, 5], "even": [2, 4]}),
        (["reduce-sum", "1", "2", "3", "4", "5"], 15),
        (["take", "1", "2", "3", "4", "5"], [1, 2, 3]),
        (["drop", "1", "2", "3", "4", "5", "-n", "1"], [2, 3, 4, 5]),
    ],
)
def test_transform(args, expected):
    result = runner.invoke(app, ["transform", *args])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == expected


def test_transform_invalid_size_fails():
    result = runner.invoke(app, ["transform", "chunk", "1", "2", "--size", "0"])
    assert result.exit_code == 1


def test_transform_partial_defaults_to_settings(settings_env):
    settings_env(WINDOW_PARTIAL="true")
    args = ["transform", "window", "1", "2", "3", "4", "--size", "2", "--step", "3"]
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [[1, 2], [4]]


def test_transform_no_partial_overrides_settings(settings_env):
    settings_env(WINDOW_PARTIAL="true")
    args = ["transform", "window", "1", "2", "3", "4", "--size", "2", "--step", "3", "--no-partial"]
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [[1, 2]]


@pytest.mark.parametrize(
    "args,expected",
    [
        (["distinct-sorted", "3", "-1", "2", "-1"], [-1, 2, 3]),
        (["reduce-sum", "-5", "2", "-3"], -6),
        (["take", "-1", "-2", "-3", "-4", "-n", "2"], [-1, -2]),
    ],
)
def test_transform_accepts_negative_numbers(args, expected):
    result = runner.invoke(app, ["transform", *args])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == expected


def test_transform_negative_count_is_usage_error():
    result = runner.invoke(app, ["transform", "take", "1", "2", "-n", "-1"])
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
