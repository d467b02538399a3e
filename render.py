# render.py
from typing import Iterable, Optional, Set

# Import from other project modules
from grid_core import Cell, Coord, RectGrid
import constants as const


def render_maze(grid: RectGrid, path: Optional[Iterable[Cell]] = None) -> str:
    """Draws the maze as fixed-width ASCII art, marking cells on `path` with ' * '."""
    on_path: Set[Coord] = {cell.coords for cell in path} if path else set()

    lines = [const.ASCII_CORNER + (const.ASCII_HORIZONTAL_WALL + const.ASCII_CORNER) * grid.cols]
    for r in range(grid.rows):
        row_str = const.ASCII_VERTICAL_WALL
        bottom_str = const.ASCII_CORNER
        for c in range(grid.cols):
            cell = grid.get(r, c)
            row_str += const.ASCII_CELL_PATH if (r, c) in on_path else const.ASCII_CELL_EMPTY
            row_str += const.ASCII_VERTICAL_WALL if cell.has_wall(const.DIR_RIGHT) else const.ASCII_VERTICAL_OPEN
            bottom_str += (
                const.ASCII_HORIZONTAL_WALL if cell.has_wall(const.DIR_BOTTOM) else const.ASCII_HORIZONTAL_OPEN
            )
            bottom_str += const.ASCII_CORNER
        lines.append(row_str)
        lines.append(bottom_str)
    return "".join(line + "\n" for line in lines)


def render_solution(grid: RectGrid, path: Iterable[Cell]) -> str:
    """Draws the maze with every cell of `path` marked."""
    return render_maze(grid, path=path)
