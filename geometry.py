# geometry.py
import numpy as np
from typing import List, Tuple

# Import from other project modules
from grid_core import RectGrid
import constants as const
from utils import normalize

Point2D = Tuple[float, float]
Segment2D = Tuple[Point2D, Point2D]
Quad2D = Tuple[Point2D, Point2D, Point2D, Point2D]


def cell_corner(grid: RectGrid, row: int, col: int, cell_size: float) -> Point2D:
    """Plot position of the top-left corner of (row, col); row 0 is drawn at the top."""
    return (col * cell_size, (grid.rows - row) * cell_size)


def cell_center(grid: RectGrid, row: int, col: int, cell_size: float = const.DEFAULT_CELL_SIZE) -> Point2D:
    x, y = cell_corner(grid, row, col, cell_size)
    return (x + cell_size / 2.0, y - cell_size / 2.0)


def extract_wall_centerlines(
    grid: RectGrid,
    cell_size: float = const.DEFAULT_CELL_SIZE,
) -> List[Segment2D]:
    """
    Extracts 2D wall CENTERLINE segments from the wall flags, one per closed edge.
    Used for plotting and as the input to extract_wall_bases_2d. Returns ((x1,y1), (x2,y2)).
    """
    print("--- Extracting Wall Centerlines ---")
    wall_segments: List[Segment2D] = []

    for cell in grid.get_all_cells():
        x0, y0 = cell_corner(grid, cell.row, cell.col, cell_size)
        x1, y1 = x0 + cell_size, y0 - cell_size

        # Outer boundary on the top and left edges; every other edge is
        # owned by the cell above or to the left through its bottom/right wall.
        if cell.row == 0 and cell.has_wall(const.DIR_TOP):
            wall_segments.append(((x0, y0), (x1, y0)))
        if cell.col == 0 and cell.has_wall(const.DIR_LEFT):
            wall_segments.append(((x0, y1), (x0, y0)))
        if cell.has_wall(const.DIR_RIGHT):
            wall_segments.append(((x1, y1), (x1, y0)))
        if cell.has_wall(const.DIR_BOTTOM):
            wall_segments.append(((x0, y1), (x1, y1)))

    print(f"--- Centerline Extraction Complete: Found {len(wall_segments)} total segments. ---")
    return wall_segments


def extract_wall_bases_2d(
    grid: RectGrid,
    wall_thickness: float,
    cell_size: float = const.DEFAULT_CELL_SIZE,
) -> List[Quad2D]:
    """
    Extracts 2D wall base polygons offset by thickness.
    Each centerline becomes a counter-clockwise quad, extended by half the
    thickness at both ends so that walls meeting at a corner overlap.
    """
    print(f"--- Extracting Wall Base Vertices (Thickness: {wall_thickness:.3f}) ---")
    if wall_thickness <= const.GEOMETRY_TOLERANCE:
        raise ValueError(f"Wall thickness must be positive, got {wall_thickness}.")

    wall_bases: List[Quad2D] = []
    half_thick = wall_thickness / 2.0
    for p1, p2 in extract_wall_centerlines(grid, cell_size):
        p1_center = np.array(p1, dtype=float)
        p2_center = np.array(p2, dtype=float)
        dir_norm = normalize(p2_center - p1_center)
        if not np.any(dir_norm):
            continue  # Degenerate segment
        perp_dir = np.array([-dir_norm[1], dir_norm[0]])
        v0 = p1_center - perp_dir * half_thick - dir_norm * half_thick
        v1 = p2_center - perp_dir * half_thick + dir_norm * half_thick
        v2 = p2_center + perp_dir * half_thick + dir_norm * half_thick
        v3 = p1_center + perp_dir * half_thick - dir_norm * half_thick
        wall_bases.append(
            (
                (float(v0[0]), float(v0[1])),
                (float(v1[0]), float(v1[1])),
                (float(v2[0]), float(v2[1])),
                (float(v3[0]), float(v3[1])),
            )
        )

    print(f"  Extracted {len(wall_bases)} wall base polygons.")
    return wall_bases
