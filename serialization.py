# serialization.py
import json
from pathlib import Path
from typing import Any, Dict, Set, Union

# Import from other project modules
from grid_core import Coord, RectGrid, neighbor_coordinate
import constants as const


def grid_to_dict(grid: RectGrid) -> Dict[str, Any]:
    """Dimensions plus, per cell, its coordinate and four wall flags (visited is transient)."""
    return {
        "rows": grid.rows,
        "cols": grid.cols,
        "cells": [
            {
                "row": cell.row,
                "col": cell.col,
                "walls": {d: cell.walls[d] for d in const.DIRECTIONS},
            }
            for cell in grid.get_all_cells()
        ],
    }


def grid_to_json(grid: RectGrid, indent: int = 2) -> str:
    return json.dumps(grid_to_dict(grid), indent=indent)


def grid_from_dict(data: Dict[str, Any]) -> RectGrid:
    """
    Rebuilds a grid from grid_to_dict() output.
    Every cell must be listed exactly once and shared walls must agree on both sides.
    """
    try:
        rows = data["rows"]
        cols = data["cols"]
        cell_entries = data["cells"]
    except KeyError as e:
        raise ValueError(f"Maze data is missing the {e.args[0]!r} field.") from None

    grid = RectGrid(rows, cols)
    seen: Set[Coord] = set()
    for entry in cell_entries:
        try:
            coords = (entry["row"], entry["col"])
            walls = {direction: bool(entry["walls"][direction]) for direction in const.DIRECTIONS}
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed cell entry {entry!r} ({e!r}).") from None
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in coords):
            raise ValueError(f"Cell coordinates must be integers, got {coords!r}.")
        cell = grid.get(*coords)
        if cell is None:
            raise ValueError(f"Cell {coords} lies outside the {rows}x{cols} grid.")
        if coords in seen:
            raise ValueError(f"Cell {coords} is listed more than once.")
        seen.add(coords)
        cell.walls.update(walls)

    if len(seen) != grid.size():
        raise ValueError(f"Expected {grid.size()} cells, found {len(seen)}.")

    # Shared walls must agree on both sides
    for cell in grid.get_all_cells():
        for direction in (const.DIR_RIGHT, const.DIR_BOTTOM):
            neighbour = grid.get(*neighbor_coordinate(cell.row, cell.col, direction))
            if neighbour is None:
                continue
            if cell.walls[direction] != neighbour.walls[const.OPPOSITE[direction]]:
                raise ValueError(
                    f"Wall mismatch between {cell.id} ({direction}) and {neighbour.id}."
                )
    return grid


def grid_from_json(text: str) -> RectGrid:
    return grid_from_dict(json.loads(text))


def save_json(grid: RectGrid, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(grid_to_json(grid))
    print(f"  Maze JSON saved to {path}")
    return path


def load_json(path: Union[str, Path]) -> RectGrid:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Maze file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return grid_from_dict(json.load(f))
