# main.py
import argparse
import os
import sys
import time
import traceback
from typing import List, Optional

# Import project modules
import constants as const
from utils import parse_dimension, parse_seed
from maze_gen import generate_maze
from solver import solve
from render import render_maze, render_solution
from serialization import save_json
from visualization import save_all_visualizations
from mesh_builder import create_2d_maze_stl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rect-maze",
        description="Generate a perfect maze with randomized depth-first search and solve it.",
    )
    # Kept as strings so that bad values fall back to the default instead of aborting
    parser.add_argument("rows", nargs="?", help=f"Number of rows (default {const.DEFAULT_ROWS}).")
    parser.add_argument("cols", nargs="?", help=f"Number of columns (default {const.DEFAULT_COLS}).")
    parser.add_argument("--seed", help="Integer seed for a reproducible maze.")
    parser.add_argument("--json", dest="json_path", help="Write the maze as JSON to this file.")
    parser.add_argument("--png", dest="png_dir", help="Write wall/solution/connectivity plots into this directory.")
    parser.add_argument("--stl", dest="stl_path", help="Write a printable STL of the maze to this file.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    start_time = time.time()
    args, extra = build_parser().parse_known_args(argv)
    if extra:
        print(f"Warning: ignoring unrecognised arguments: {' '.join(extra)}")

    rows = parse_dimension(args.rows, const.DEFAULT_ROWS)
    cols = parse_dimension(args.cols, const.DEFAULT_COLS)
    seed = parse_seed(args.seed)
    if args.seed is not None and seed is None:
        print(f"Warning: seed {args.seed!r} is not an integer, using a random seed.")

    print("Maze Generator\n")
    print(f"Generating a {rows}x{cols} maze...\n")
    grid = generate_maze(rows, cols, seed=seed)

    print("Generated Maze:")
    print(render_maze(grid))

    print("Finding solution path...\n")
    solution = solve(grid, (0, 0), (rows - 1, cols - 1))

    print("Maze with Solution Path (*):")
    print(render_solution(grid, solution))

    print(f"Solution path length: {len(solution)} steps")

    # --- Optional exports ---
    if args.json_path:
        try:
            save_json(grid, args.json_path)
        except Exception as e:
            print(f"ERROR writing maze JSON: {e}")
            traceback.print_exc()

    if args.png_dir:
        try:
            save_all_visualizations(grid, solution, args.png_dir)
        except Exception as e:
            print(f"An error occurred during visualization generation: {e}")
            traceback.print_exc()

    if args.stl_path:
        try:
            stl_dir = os.path.dirname(args.stl_path)
            if stl_dir:
                os.makedirs(stl_dir, exist_ok=True)
            create_2d_maze_stl(grid, args.stl_path)
        except Exception as e:
            print(f"An error occurred during 2D STL generation: {e}")
            traceback.print_exc()

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
