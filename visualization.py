# visualization.py
import os

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional, Sequence, Tuple

# Import from other project modules
from grid_core import Cell, Coord, RectGrid
from geometry import cell_center, extract_wall_centerlines
from solver import passage_distances
import constants as const


# --- Visualization Helpers ---
def _setup_plot(grid: RectGrid) -> Tuple[plt.Figure, plt.Axes]:
    """Creates an equal-aspect axis sized to the grid."""
    width = max(4.0, min(grid.cols * 0.4, 16.0))
    height = max(4.0, min(grid.rows * 0.4, 16.0))
    fig, ax = plt.subplots(figsize=(width, height))
    ax.set_aspect("equal")
    ax.set_xlim(-0.5, grid.cols + 0.5)
    ax.set_ylim(-0.5, grid.rows + 0.5)
    ax.set_axis_off()
    return fig, ax


def _draw_walls(ax: plt.Axes, grid: RectGrid, alpha: float = 1.0):
    """Draws every closed wall as a line segment."""
    wall_segments = extract_wall_centerlines(grid)
    print(f"  Visualizing {len(wall_segments)} wall centerlines...")
    for (x1, y1), (x2, y2) in wall_segments:
        ax.plot([x1, x2], [y1, y2],
                const.VIS_WALL_LINE_STYLE,
                lw=const.VIS_WALL_LINE_LW,
                alpha=alpha)


def _draw_entry_exit(ax: plt.Axes, grid: RectGrid, entry: Cell, exit_: Cell):
    """Marks entry and exit cells."""
    ex, ey = cell_center(grid, entry.row, entry.col)
    ax.plot(ex, ey, const.VIS_ENTRY_MARKER,
            markersize=const.VIS_SOLUTION_ENTRY_MARKER_SIZE,
            mfc=const.VIS_SOLUTION_ENTRY_MFC,
            mec=const.VIS_SOLUTION_ENTRY_MEC,
            label="Entry")
    xx, xy = cell_center(grid, exit_.row, exit_.col)
    ax.plot(xx, xy, const.VIS_EXIT_MARKER,
            markersize=const.VIS_SOLUTION_EXIT_MARKER_SIZE,
            mfc=const.VIS_SOLUTION_EXIT_MFC,
            mec=const.VIS_SOLUTION_EXIT_MEC,
            label="Exit")


def _save(fig: plt.Figure, filename: str):
    fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)


# --- Main Visualization Functions ---

def visualize_maze_walls(grid: RectGrid, filename: str = "maze_walls.png") -> bool:
    """Visualizes the maze walls (using centerlines)."""
    print(f"--- Generating Maze Walls Visualization: {filename} ---")
    try:
        fig, ax = _setup_plot(grid)
        _draw_walls(ax, grid)
        ax.set_title(f"Maze Walls ({grid.rows}x{grid.cols})")
        _save(fig, filename)
        print(f"  Walls visualization saved to {filename}")
        return True
    except Exception as e:
        print(f"ERROR during visualization: {e}")
        return False


def visualize_maze_solution(
    grid: RectGrid,
    solution_path: Sequence[Cell],
    filename: str = "maze_solution.png",
) -> bool:
    """Visualizes a solution path on top of faint walls."""
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    if not solution_path:
        print("  Could not find solution path, cannot visualize.")
        return False

    try:
        fig, ax = _setup_plot(grid)
        _draw_walls(ax, grid, alpha=const.VIS_WALL_LINE_ALPHA)

        print(f"  Visualizing solution path ({len(solution_path)} cells)...")
        centers = [cell_center(grid, cell.row, cell.col) for cell in solution_path]
        ax.plot([x for x, _ in centers], [y for _, y in centers],
                const.VIS_SOLUTION_LINE_STYLE,
                lw=const.VIS_SOLUTION_LINE_LW,
                alpha=const.VIS_SOLUTION_LINE_ALPHA)
        _draw_entry_exit(ax, grid, solution_path[0], solution_path[-1])

        ax.set_title("Maze Solution Path")
        _save(fig, filename)
        print(f"  Solution visualization saved to {filename}")
        return True
    except Exception as e:
        print(f"ERROR during visualization: {e}")
        return False


def visualize_maze_connectivity(
    grid: RectGrid,
    start: Optional[Coord] = None,
    filename: str = "maze_connectivity.png",
) -> bool:
    """Visualizes cell connectivity and distance from the start cell."""
    print(f"--- Generating Connectivity Visualization: {filename} ---")
    start = start if start is not None else (0, 0)
    distances = passage_distances(grid, start)
    reachable = int(np.count_nonzero(distances >= 0))
    print(f"  Connectivity check visited {reachable}/{grid.size()} cells.")
    if reachable < grid.size():
        print("  WARNING: Not all cells are reachable from the start node!")

    try:
        fig, ax = _setup_plot(grid)
        cmap = matplotlib.colormaps[const.VIS_CONN_COLORMAP].copy()
        cmap.set_bad(const.VIS_CONN_UNREACHABLE_COLOR)
        masked = np.ma.masked_less(distances, 0)
        image = ax.imshow(
            masked,
            cmap=cmap,
            extent=(0, grid.cols, 0, grid.rows),
            origin="upper",
            interpolation="nearest",
        )
        _draw_walls(ax, grid, alpha=const.VIS_WALL_LINE_ALPHA)

        cbar = fig.colorbar(image, ax=ax, shrink=0.7, aspect=20, pad=0.08)
        cbar.set_label(f"Distance from Start Cell {start}")
        ax.set_title(f"Maze Connectivity ({reachable}/{grid.size()} Reachable)")
        _save(fig, filename)
        print(f"  Connectivity visualization saved to {filename}")
        return True
    except Exception as e:
        print(f"ERROR during visualization: {e}")
        return False


def save_all_visualizations(grid: RectGrid, solution_path: List[Cell], output_dir: str) -> List[str]:
    """Writes the walls, solution and connectivity plots into output_dir; returns the files written."""
    os.makedirs(output_dir, exist_ok=True)
    written = []
    targets = [
        ("maze_walls.png", lambda f: visualize_maze_walls(grid, f)),
        ("maze_solution.png", lambda f: visualize_maze_solution(grid, solution_path, f)),
        ("maze_connectivity.png", lambda f: visualize_maze_connectivity(grid, (0, 0), f)),
    ]
    for name, draw in targets:
        filename = os.path.join(output_dir, name)
        if draw(filename):
            written.append(filename)
    return written
