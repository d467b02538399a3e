import json

import pytest

from conftest import assert_walls_symmetric
from maze_gen import generate_maze
from serialization import (
    grid_from_dict,
    grid_from_json,
    grid_to_dict,
    grid_to_json,
    load_json,
    save_json,
)
from solver import solve


def test_dict_form_of_golden_maze(first_choice_rng):
    data = grid_to_dict(generate_maze(2, 2, rng=first_choice_rng))
    assert data["rows"] == 2 and data["cols"] == 2
    assert data["cells"][0] == {
        "row": 0,
        "col": 0,
        "walls": {"top": True, "right": False, "bottom": True, "left": True},
    }
    assert [(c["row"], c["col"]) for c in data["cells"]] == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert all("visited" not in c for c in data["cells"])


def test_json_text_reloads_to_same_layout():
    grid = generate_maze(6, 9, seed=12)
    text = grid_to_json(grid)
    assert json.loads(text)["cols"] == 9
    restored = grid_from_json(text)
    assert grid_to_dict(restored) == grid_to_dict(grid)
    assert_walls_symmetric(restored)
    assert not any(cell.is_visited() for cell in restored.get_all_cells())


def test_file_save_and_load(tmp_path):
    grid = generate_maze(4, 5, seed=31)
    target = save_json(grid, tmp_path / "nested" / "maze.json")
    assert target.exists()
    restored = load_json(target)
    assert [c.coords for c in solve(restored, (0, 0), (3, 4))] == [
        c.coords for c in solve(grid, (0, 0), (3, 4))
    ]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / "absent.json")


def _walled_2x1():
    return {
        "rows": 1,
        "cols": 2,
        "cells": [
            {"row": 0, "col": 0, "walls": {"top": True, "right": True, "bottom": True, "left": True}},
            {"row": 0, "col": 1, "walls": {"top": True, "right": True, "bottom": True, "left": True}},
        ],
    }


def test_mismatched_shared_wall_rejected():
    data = _walled_2x1()
    data["cells"][0]["walls"]["right"] = False
    with pytest.raises(ValueError, match="mismatch"):
        grid_from_dict(data)


def test_duplicate_cell_rejected():
    data = _walled_2x1()
    data["cells"][1] = dict(data["cells"][0])
    with pytest.raises(ValueError, match="more than once"):
        grid_from_dict(data)


def test_out_of_range_cell_rejected():
    data = _walled_2x1()
    data["cells"][1]["col"] = 5
    with pytest.raises(ValueError, match="outside"):
        grid_from_dict(data)


def test_missing_cell_or_field_rejected():
    data = _walled_2x1()
    data["cells"].pop()
    with pytest.raises(ValueError, match="Expected 2 cells"):
        grid_from_dict(data)
    with pytest.raises(ValueError, match="rows"):
        grid_from_dict({"cols": 1, "cells": []})


def test_solver_on_loaded_disconnected_grid():
    grid = grid_from_dict(_walled_2x1())
    assert solve(grid, (0, 0), (0, 1)) == []


def test_cell_missing_coordinate_rejected():
    data = _walled_2x1()
    del data["cells"][0]["row"]
    with pytest.raises(ValueError, match="Malformed cell entry"):
        grid_from_dict(data)


def test_cell_missing_wall_direction_rejected():
    data = _walled_2x1()
    del data["cells"][1]["walls"]["left"]
    with pytest.raises(ValueError, match="Malformed cell entry"):
        grid_from_dict(data)


def test_non_integer_coordinate_rejected():
    data = _walled_2x1()
    data["cells"][0]["row"] = "0"
    with pytest.raises(ValueError, match="must be integers"):
        grid_from_dict(data)
