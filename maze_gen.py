# maze_gen.py
import random
from typing import List, Optional

# Import from other project modules
from grid_core import Coord, RectGrid


def carve_passages(
    grid: RectGrid,
    rng: Optional[random.Random] = None,
    start: Optional[Coord] = None,
) -> int:
    """
    Generates maze passages within the grid using iterative Recursive Backtracking.
    Clears wall pairs on the cells of `grid`; returns the number of cells visited.
    `rng` only needs `randrange` (start selection) and `choice` (neighbour selection).
    """
    print("--- Starting Maze Generation (Recursive Backtracking) ---")
    rng = rng if rng is not None else random.Random()

    # Reset previous maze state (if any)
    grid.reset()

    if start is None:
        start_cell = grid.random_cell(rng)
    else:
        start_cell = grid.get(*start)
        if start_cell is None:
            raise ValueError(f"Start cell {start} lies outside the {grid.rows}x{grid.cols} grid.")

    print(f"  Starting maze generation at cell: {start_cell.id}")
    start_cell.mark_visited()
    # Stack holds coordinates, not cells
    stack: List[Coord] = [start_cell.coords]
    visited_count = 1

    # Main loop
    while stack:
        row, col = stack[-1]
        current_cell = grid.get(row, col)

        unvisited_neighbours = [
            (direction, neighbour)
            for direction, neighbour in grid.neighbours(current_cell)
            if not neighbour.is_visited()
        ]

        if unvisited_neighbours:
            # Choose a random unvisited neighbour
            direction, next_cell = rng.choice(unvisited_neighbours)
            grid.link(current_cell, next_cell, direction)
            # Mark the neighbour as visited and push it onto the stack
            next_cell.mark_visited()
            stack.append(next_cell.coords)
            visited_count += 1
        else:
            # No unvisited neighbours, backtrack
            stack.pop()

    print(f"--- Maze Generation Complete: Linked {visited_count}/{grid.size()} cells. ---")

    if visited_count < grid.size():
        print(f"ERROR: MAZE GENERATION FAILED TO VISIT ALL CELLS! Visited {visited_count}/{grid.size()}.")
        unvisited_example = next((c for c in grid.get_all_cells() if not c.is_visited()), None)
        if unvisited_example:
            print(f"  Example unvisited cell: {unvisited_example.id}")

    return visited_count


def generate_maze(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    start: Optional[Coord] = None,
    rng: Optional[random.Random] = None,
) -> RectGrid:
    """Builds a rows x cols grid and carves a perfect maze into it.

    An explicit `rng` takes precedence over `seed`; with neither, generation is
    non-deterministic.
    """
    grid = RectGrid(rows, cols)
    if rng is None:
        rng = random.Random(seed)
    carve_passages(grid, rng=rng, start=start)
    return grid
