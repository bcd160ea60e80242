"""Tests for benchmark test data files."""

import shutil

import pytest

from stdio_utils.bench.fixtures import (
    create_test_data_file,
    delete_test_data_file,
    fopen,
)
from stdio_utils.errors import BenchmarkError, FixtureError


def test_creates_lines_in_range(tmp_path):
    path = create_test_data_file(tmp_path / "data.txt", 1000, low=5, high=9, seed=1)
    values = [int(line) for line in path.read_text().splitlines()]
    assert len(values) == 1000
    assert all(5 <= value <= 9 for value in values)


def test_seed_makes_data_reproducible(tmp_path):
    first = create_test_data_file(tmp_path / "a.txt", 200, seed=42)
    second = create_test_data_file(tmp_path / "b.txt", 200, seed=42)
    assert first.read_bytes() == second.read_bytes()


def test_zero_lines_creates_empty_file(tmp_path):
    path = create_test_data_file(tmp_path / "empty.txt", 0)
    assert path.read_bytes() == b""


def test_refuses_to_overwrite(tmp_path):
    existing = tmp_path / "data.txt"
    existing.write_text("keep me\n")
    with pytest.raises(FixtureError, match="Failed to create file"):
        create_test_data_file(existing, 10)
    assert existing.read_text() == "keep me\n"


def test_rejects_negative_line_count(tmp_path):
    with pytest.raises(FixtureError):
        create_test_data_file(tmp_path / "data.txt", -1)
    assert not (tmp_path / "data.txt").exists()


def test_rejects_inverted_range(tmp_path):
    with pytest.raises(FixtureError, match="Invalid range"):
        create_test_data_file(tmp_path / "data.txt", 1, low=10, high=1)


def test_rejects_unknown_generator(tmp_path):
    with pytest.raises(FixtureError, match="Unknown generator"):
        create_test_data_file(tmp_path / "data.txt", 1, generator="jot")
    assert not (tmp_path / "data.txt").exists()


@pytest.mark.skipif(shutil.which("shuf") is None, reason="shuf not installed")
def test_shuf_generator(tmp_path):
    path = create_test_data_file(
        tmp_path / "data.txt", 500, low=0, high=999, generator="shuf"
    )
    values = [int(line) for line in path.read_text().splitlines()]
    assert len(values) == 500
    assert all(0 <= value <= 999 for value in values)


def test_delete(tmp_path):
    path = create_test_data_file(tmp_path / "data.txt", 3)
    delete_test_data_file(path)
    assert not path.exists()


def test_delete_missing_file_fails(tmp_path):
    with pytest.raises(FixtureError, match="Failed to delete test file"):
        delete_test_data_file(tmp_path / "missing.txt")


def test_fopen_missing_file_fails(tmp_path):
    with pytest.raises(FixtureError, match="Failed to open file"):
        fopen(tmp_path / "missing.txt")


def test_fixture_errors_are_benchmark_errors():
    assert issubclass(FixtureError, BenchmarkError)
