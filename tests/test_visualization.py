import os

from grid_core import RectGrid
from maze_gen import generate_maze
from solver import solve
from visualization import (
    save_all_visualizations,
    visualize_maze_connectivity,
    visualize_maze_solution,
    visualize_maze_walls,
)


def test_walls_plot_written(tmp_path):
    target = tmp_path / "walls.png"
    assert visualize_maze_walls(generate_maze(6, 8, seed=1), str(target))
    assert target.exists()


def test_solution_plot_written(tmp_path):
    grid = generate_maze(6, 6, seed=2)
    path = solve(grid, (0, 0), (5, 5))
    target = tmp_path / "solution.png"
    assert visualize_maze_solution(grid, path, str(target))
    assert target.exists()


def test_solution_plot_skipped_without_path(tmp_path, capsys):
    target = tmp_path / "solution.png"
    assert not visualize_maze_solution(RectGrid(2, 2), [], str(target))
    assert not target.exists()
    assert "cannot visualize" in capsys.readouterr().out


def test_connectivity_plot_reports_unreachable_cells(tmp_path, capsys):
    target = tmp_path / "conn.png"
    assert visualize_maze_connectivity(RectGrid(2, 3), (0, 0), str(target))
    assert target.exists()
    out = capsys.readouterr().out
    assert "visited 1/6 cells" in out
    assert "Not all cells are reachable" in out


def test_save_all_visualizations(tmp_path):
    grid = generate_maze(4, 5, seed=3)
    path = solve(grid, (0, 0), (3, 4))
    written = save_all_visualizations(grid, path, str(tmp_path / "plots"))
    assert sorted(os.path.basename(p) for p in written) == [
        "maze_connectivity.png",
        "maze_solution.png",
        "maze_walls.png",
    ]
