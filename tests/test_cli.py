import re

import pytest

from tspsolve.cli import main

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


def _write_tsp(path, points):
    lines = [
        "NAME: sample",
        "TYPE: TSP",
        f"DIMENSION: {len(points)}",
        "EDGE_WEIGHT_TYPE: EUC_2D",
        "NODE_COORD_SECTION",
    ]
    lines += [f"{i} {x} {y}" for i, (x, y) in enumerate(points, start=1)]
    lines.append("EOF")
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def _parse_output(text):
    cost = int(re.search(r"^Tour cost: (-?\d+)$", text, re.M).group(1))
    final = int(re.search(r"^Final cost: (-?\d+)$", text, re.M).group(1))
    sequence = re.search(r"^Tour sequence:(.*)$", text, re.M).group(1).split()
    return cost, final, [int(city) for city in sequence]


def test_held_karp_mode(tmp_path, capsys):
    path = _write_tsp(tmp_path / "square.tsp", SQUARE)
    assert main(["--mode", "held-karp", "--input", path]) == 0
    out = capsys.readouterr().out
    cost, final, tour = _parse_output(out)
    assert cost == 40
    assert final == cost
    assert tour[0] == tour[-1] == 0
    assert sorted(tour[:-1]) == [0, 1, 2, 3]
    assert "=== Final Summary ===" in out


@pytest.mark.parametrize("mode", ["mst", "myalgo"])
def test_heuristic_modes_report_consistent_tour(tmp_path, capsys, mode):
    path = _write_tsp(tmp_path / "square.tsp", SQUARE)
    assert main(["--input", path, "--mode", mode]) == 0
    out = capsys.readouterr().out
    cost, final, tour = _parse_output(out)
    assert final == cost
    assert sorted(tour[:-1]) == [0, 1, 2, 3]
    assert tour[0] == tour[-1]
    assert cost >= 40
    assert re.search(r"^Elapsed time: \d+\.\d{3} seconds$", out, re.M)
    assert re.search(r"^Total time: \d+\.\d{3} seconds$", out, re.M)


def test_held_karp_too_many_cities_reports_inf(tmp_path, capsys):
    points = [(float(i), float(i * i % 7)) for i in range(26)]
    path = _write_tsp(tmp_path / "big.tsp", points)
    assert main(["--mode", "held-karp", "--input", path]) == 0
    cost, final, tour = _parse_output(capsys.readouterr().out)
    assert cost == 2147483647
    assert final == cost
    assert tour == []


def test_wrong_argument_count(capsys):
    assert main(["--mode", "mst"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_unknown_mode(tmp_path, capsys):
    path = _write_tsp(tmp_path / "square.tsp", SQUARE)
    assert main(["--mode", "fastest", "--input", path]) == 1
    assert "Unknown mode: fastest" in capsys.readouterr().err


def test_unknown_option(capsys):
    assert main(["--mode", "mst", "--output", "x.tsp"]) == 1
    assert "Unknown option: --output" in capsys.readouterr().err


def test_missing_input_option(capsys):
    assert main(["--mode", "mst", "--mode", "myalgo"]) == 1
    assert "--input option is required" in capsys.readouterr().err


def test_unreadable_file(tmp_path, capsys):
    missing = str(tmp_path / "absent.tsp")
    assert main(["--mode", "mst", "--input", missing]) == 1
    assert f"Failed to parse TSP file: {missing}" in capsys.readouterr().err