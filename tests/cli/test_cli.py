import json
import logging
from pathlib import Path

import pytest

from storenav import cli


def extract_json_from_stdout(output: str) -> str:
    """Return the JSON payload from stdout that may include status lines."""
    json_start = output.find("{")
    if json_start == -1:
        return output

    brace_count = 0
    for i in range(json_start, len(output)):
        if output[i] == "{":
            brace_count += 1
        elif output[i] == "}":
            brace_count -= 1
            if brace_count == 0:
                return output[json_start : i + 1]
    return output


def test_no_args_prints_help_and_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: storenav" in capsys.readouterr().out


def test_route_prints_names_and_weight(store_layout_file: Path, capsys) -> None:
    cli.main(["--quiet", "route", str(store_layout_file), "entrance", "CHECKOUT"])
    out = capsys.readouterr().out
    assert "Entrance -> Aisle 1 -> Checkout" in out
    assert "Total weight: 5" in out


def test_route_json(store_layout_file: Path, capsys) -> None:
    cli.main(["--quiet", "route", str(store_layout_file), "Entrance", "Checkout", "--json"])
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload == {"sections": ["Entrance", "Aisle 1", "Checkout"], "cost": 5.0}


def test_route_no_path_exits_one(store_layout_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "route", str(store_layout_file), "Entrance", "Dairy"])
    assert exc_info.value.code == 1
    assert "No path between 'Entrance' and 'Dairy'" in capsys.readouterr().err


def test_route_invalid_location_exits_one(store_layout_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "route", str(store_layout_file), "Freezer", "Dairy"])
    assert exc_info.value.code == 1
    assert "InvalidLocationError" in capsys.readouterr().err


def test_stops_preserves_order(store_layout_file: Path, capsys) -> None:
    cli.main(
        ["--quiet", "stops", str(store_layout_file), "Aisle 1", "Checkout", "aisle 1", "--json"]
    )
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload == {"sections": ["Aisle 1", "Checkout", "Aisle 1"], "cost": None}


def test_stops_unresolved_exits_one(store_layout_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "stops", str(store_layout_file), "Aisle 1", "Nonexistent"])
    assert exc_info.value.code == 1
    assert "'Nonexistent'" in capsys.readouterr().err


def test_inspect_summary_and_detail(store_layout_file: Path, capsys) -> None:
    cli.main(["--quiet", "inspect", str(store_layout_file), "--detail"])
    out = capsys.readouterr().out
    assert "STORENAV LAYOUT INSPECTION" in out
    assert "Venue: Main Street Store" in out
    assert "Sections: 4" in out
    assert "Walkways: 3" in out
    assert "Isolated sections: 1" in out
    assert "Unresolved connections: 1" in out
    assert "Degree" in out
    assert "Aisle 1" in out and "Checkout" in out


def test_missing_file_exits_one(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "Layout file not found" in capsys.readouterr().err


def test_invalid_layout_exits_one(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("sections:\n  - {name: A}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(bad)])
    assert exc_info.value.code == 1
    assert "ValidationError" in capsys.readouterr().err


def test_unknown_subcommand_exits_two() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["frobnicate"])
    assert exc_info.value.code == 2


def test_verbose_and_quiet_switch_levels(store_layout_file: Path, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="storenav"):
        cli.main(["--verbose", "route", str(store_layout_file), "Entrance", "Checkout"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)
    assert any("Shortest path found" in r.getMessage() for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="storenav"):
        cli.main(["--quiet", "route", str(store_layout_file), "Entrance", "Checkout"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)
