from __future__ import annotations

import pytest

from collections_showcase.config import Settings
from collections_showcase.errors import InvalidArgumentError
from collections_showcase.showcase import SECTIONS, run_sections, section_names


@pytest.fixture
def settings() -> Settings:
    return Settings(LARGE_INPUT_SIZE=2_000)


@pytest.mark.parametrize("name", list(SECTIONS))
def test_every_section_runs(settings, name):
    lines = SECTIONS[name](settings)
    assert lines
    assert lines[0].startswith("===")


def test_collections_section_uses_settings():
    lines = run_sections(["collections"], Settings(CHUNK_SIZE=2, TAKE_COUNT=1))
    assert "Chunked(2): [[1, 2], [3, 4], [5, 6], [7]]" in lines
    assert "Take/drop(1): [1] / [2, 3, 4, 5]" in lines
    assert "Copy-insert: [1, 2, 3, 9] (original still [1, 2, 3])" in lines


def test_advanced_collections_section(settings):
    lines = run_sections(["advanced-collections"], settings)
    assert "Chained operations: [16, 36, 64]" in lines
    assert "Collection result: [1024, 1156, 1296, 1444, 1600, 1764, 1936, 2116, 2304, 2500]" in lines
    assert "Sequence result: [1024, 1156, 1296, 1444, 1600, 1764, 1936, 2116, 2304, 2500]" in lines
    assert "Grouped by department: {'Engineering': ['Alice', 'Charlie'], 'Marketing': ['Bob'], 'Sales': ['Diana']}" in lines
    assert "Adults: 4, Minors: 0" in lines


def test_delegation_section_rejects_negative_balance(settings):
    lines = run_sections(["delegation"], settings)
    assert "Name changed from 'Unknown' to 'Alice'" in lines
    assert "Invalid balance: -50 (cannot be negative)" in lines
    assert lines[-1] == "Final balance: 100"


def test_run_sections_defaults_to_all_in_order(settings):
    lines = run_sections([], settings)
    headers = [line for line in lines if line.startswith("===")]
    assert len(headers) == len(section_names())


def test_unknown_section_rejected(settings):
    with pytest.raises(InvalidArgumentError, match="nope"):
        run_sections(["collections", "nope"], settings)
