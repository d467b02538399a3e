import json

import pytest

from main import build_parser, main
from serialization import load_json
from solver import solve


def _run(capsys, argv):
    assert main(argv) == 0
    return capsys.readouterr().out


def test_default_run_prints_maze_and_solution(capsys):
    out = _run(capsys, [])
    assert "Generating a 10x10 maze..." in out
    assert "Generated Maze:" in out
    assert "Maze with Solution Path (*):" in out
    assert " * " in out
    assert "Solution path length: " in out


@pytest.mark.parametrize("argv", [["abc", "xyz"], ["0", "-4"]])
def test_bad_dimensions_fall_back_to_default(capsys, argv):
    assert "Generating a 10x10 maze..." in _run(capsys, argv)


def test_dimensions_use_leading_integer(capsys):
    assert "Generating a 3x10 maze..." in _run(capsys, ["3.5"])
    assert "Generating a 12x4 maze..." in _run(capsys, ["12x", "4rows"])


def test_explicit_dimensions_and_seed(capsys):
    out = _run(capsys, ["3", "4", "--seed", "17"])
    assert "Generating a 3x4 maze..." in out
    assert "+---+---+---+---+" in out
    assert out.count("Solution path length: ") == 1


def test_same_seed_same_output(capsys):
    first = _run(capsys, ["5", "6", "--seed", "3"])
    second = _run(capsys, ["5", "6", "--seed", "3"])
    strip = lambda text: text.split("--- Total Execution Time")[0]
    assert strip(first) == strip(second)


def test_bad_seed_and_extra_arguments_warn(capsys):
    out = _run(capsys, ["2", "2", "--seed", "nope", "--colour"])
    assert "is not an integer" in out
    assert "ignoring unrecognised arguments: --colour" in out
    assert "Generating a 2x2 maze..." in out


def test_step_count_matches_exported_maze(capsys, tmp_path):
    target = tmp_path / "maze.json"
    out = _run(capsys, ["4", "7", "--seed", "8", "--json", str(target)])
    assert json.loads(target.read_text())["rows"] == 4
    steps = len(solve(load_json(target), (0, 0), (3, 6)))
    assert f"Solution path length: {steps} steps" in out


def test_png_and_stl_exports(capsys, tmp_path):
    png_dir = tmp_path / "plots"
    stl_path = tmp_path / "models" / "maze.stl"
    _run(capsys, ["4", "4", "--seed", "1", "--png", str(png_dir), "--stl", str(stl_path)])
    assert (png_dir / "maze_walls.png").exists()
    assert (png_dir / "maze_solution.png").exists()
    assert (png_dir / "maze_connectivity.png").exists()
    assert stl_path.exists()


def test_parser_keeps_positionals_as_text():
    args = build_parser().parse_args(["7", "x"])
    assert (args.rows, args.cols) == ("7", "x")
