"""
End-to-end runs of the CLI against the built-in dataset.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from city_density import main
from city_density.reporter import render_table

runner = CliRunner()

EXPECTED_CITY_ORDER = [
    "Lagos",
    "Delhi",
    "New York City",
    "Sao Paulo",
    "Tokyo",
    "Mexico City",
    "London",
    "Bangkok",
    "Shanghai",
    "Istanbul",
]


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CITY_DENSITY_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("CITY_DENSITY_LOG_JSON", "false")


def test_report_prints_ranked_table() -> None:
    result = runner.invoke(main.app, [])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2 + len(EXPECTED_CITY_ORDER)
    assert lines[0].startswith("City")
    assert set(lines[1]) == {"-"} and len(lines[1]) == len(lines[0])
    assert [line[:18].rstrip() for line in lines[2:]] == EXPECTED_CITY_ORDER
    assert lines[2].endswith("   100")

    rel = [int(line[-6:]) for line in lines[2:]]
    assert rel == sorted(rel, reverse=True)


def test_report_output_is_stable() -> None:
    first = runner.invoke(main.app, [])
    second = runner.invoke(main.app, [])

    assert first.output == second.output


def test_report_matches_render_table() -> None:
    result = runner.invoke(main.app, [])

    expected = render_table(main.run_pipeline(main.CITY_DATA))
    assert result.output == "\n".join(expected) + "\n"


def test_pipeline_failure_exits_non_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "CITY_DATA", "city,population,area,density,country\nA,0,1,0,X")

    result = runner.invoke(main.app, [])

    assert result.exit_code == 1
    assert "Error processing city data: Invalid data: maximum density cannot be zero" in (
        result.output
    )
    assert "City" not in result.output


def test_missing_header_message(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "CITY_DATA", "city,population,area,density\nA,1,1,1")

    result = runner.invoke(main.app, [])

    assert result.exit_code == 1
    assert "Missing required headers: country" in result.output
