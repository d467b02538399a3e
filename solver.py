# solver.py
import numpy as np
from collections import deque
from typing import Iterator, List, Set, Tuple

# Import from other project modules
from grid_core import Cell, Coord, RectGrid, neighbor_coordinate
import constants as const


def solve(grid: RectGrid, start: Coord, end: Coord) -> List[Cell]:
    """
    Finds a path between two cells using Depth-First Search through open walls.
    Directions are tried in the order top, right, bottom, left. Returns the cells
    from start to end inclusive, or an empty list when no path exists.
    """
    print(f"--- Finding path from {start} to {end} ---")
    start_cell = grid.get(*start)
    end_cell = grid.get(*end)
    if start_cell is None or end_cell is None:
        print("ERROR: Invalid start or end cell provided.")
        return []

    # Independent of the generation-time visited flags
    visited: Set[Coord] = {start_cell.coords}
    path: List[Cell] = [start_cell]
    stack: List[Tuple[Coord, Iterator[str]]] = [(start_cell.coords, iter(const.DIRECTIONS))]

    if start_cell.coords == end_cell.coords:
        print("  Path found!")
        return path

    while stack:
        (row, col), directions = stack[-1]
        current_cell = grid.get(row, col)
        advanced = False
        for direction in directions:
            if current_cell.has_wall(direction):
                continue
            neighbour = grid.get(*neighbor_coordinate(row, col, direction))
            if neighbour is None or neighbour.coords in visited:
                continue
            visited.add(neighbour.coords)
            path.append(neighbour)
            if neighbour.coords == end_cell.coords:
                print(f"  Path found! Path length: {len(path)} cells.")
                return path
            stack.append((neighbour.coords, iter(const.DIRECTIONS)))
            advanced = True
            break

        if not advanced:
            # Dead end, backtrack
            stack.pop()
            path.pop()

    print("  Path not found!")
    return []


def passage_distances(grid: RectGrid, start: Coord) -> np.ndarray:
    """Breadth-first hop distance from `start` to every cell; -1 marks unreachable cells."""
    distances = np.full((grid.rows, grid.cols), -1, dtype=int)
    start_cell = grid.get(*start)
    if start_cell is None:
        print(f"ERROR: Start cell {start} is outside the grid.")
        return distances

    distances[start_cell.row, start_cell.col] = 0
    queue = deque([start_cell])
    while queue:
        current_cell = queue.popleft()
        current_dist = distances[current_cell.row, current_cell.col]
        for direction in const.DIRECTIONS:
            if current_cell.has_wall(direction):
                continue
            neighbour = grid.get(*neighbor_coordinate(current_cell.row, current_cell.col, direction))
            if neighbour is not None and distances[neighbour.row, neighbour.col] == -1:
                distances[neighbour.row, neighbour.col] = current_dist + 1
                queue.append(neighbour)
    return distances
