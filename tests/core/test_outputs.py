"""Tests for the GitHub Actions output file."""

from pathlib import Path

import pytest

from rrcheck.core.outputs import write_outputs


def test_no_output_file_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    assert write_outputs({"check-result": "PASS"}) is False


def test_appends_name_value_lines(tmp_path: Path) -> None:
    target = tmp_path / "output"
    target.write_text("earlier=1\n")

    assert write_outputs({"check-result": "PASS", "logs-path": "out/errors.txt"}, target) is True
    assert target.read_text() == "earlier=1\ncheck-result=PASS\nlogs-path=out/errors.txt\n"


def test_multiline_values_use_delimiters(tmp_path: Path) -> None:
    target = tmp_path / "output"

    write_outputs({"note": "a\nb"}, target)

    first, *body, last = target.read_text().splitlines()
    name, delimiter = first.split("<<")
    assert name == "note"
    assert body == ["a", "b"]
    assert last == delimiter
