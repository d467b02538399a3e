# mesh_builder.py
import numpy as np
import trimesh
import traceback
from typing import List, Optional, Tuple

# Import from other project modules
from grid_core import RectGrid
from geometry import Quad2D, extract_wall_bases_2d
import constants as const


# Side, top and bottom faces for a quad prism: 0-3 base, 4-7 top
PRISM_FACES = np.array(
    [
        [0, 1, 5],
        [0, 5, 4],
        [1, 2, 6],
        [1, 6, 5],
        [2, 3, 7],
        [2, 7, 6],
        [3, 0, 4],
        [3, 4, 7],  # Sides
        [4, 5, 6],
        [4, 6, 7],  # Top cap
        [3, 2, 1],
        [3, 1, 0],  # Bottom cap (reversed)
    ],
    dtype=np.int32,
)


def _create_extruded_prism_simple(
    base_verts_2d: Quad2D,
    height: float,
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Extrudes a counter-clockwise quad from z=0 up to z=height."""
    if len(base_verts_2d) != 4:
        return None  # Expect quads
    base_verts = np.array([[x, y, 0.0] for x, y in base_verts_2d], dtype=float)
    top_verts = base_verts + np.array([0.0, 0.0, height])
    verts = np.vstack((base_verts, top_verts))
    return verts, PRISM_FACES.copy()


def _is_mesh_degenerate(vertices: np.ndarray) -> bool:
    """Checks for non-finite vertices or a zero-area footprint."""
    if not np.all(np.isfinite(vertices)):
        return True
    extent = vertices.max(axis=0) - vertices.min(axis=0)
    return bool(np.any(extent[:2] < const.GEOMETRY_TOLERANCE))


def build_maze_mesh(
    grid: RectGrid,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
    cell_size: float = const.DEFAULT_CELL_SIZE,
) -> trimesh.Trimesh:
    """
    Builds the printable maze: every closed wall extruded to `wall_height` on a
    rectangular base plate whose top face sits at z=0.
    """
    if wall_height <= const.GEOMETRY_TOLERANCE:
        raise ValueError(f"Wall height must be positive, got {wall_height}.")

    print(f"--- Building Maze Mesh (Wall H={wall_height:.2f}, Base H={base_height:.2f}) ---")
    wall_bases = extract_wall_bases_2d(grid, wall_thickness, cell_size)

    all_wall_meshes: List[trimesh.Trimesh] = []
    skip_count = 0
    for base_verts_2d in wall_bases:
        extrusion_result = _create_extruded_prism_simple(base_verts_2d, wall_height)
        if extrusion_result is None or _is_mesh_degenerate(extrusion_result[0]):
            skip_count += 1
            continue
        verts, faces = extrusion_result
        all_wall_meshes.append(trimesh.Trimesh(vertices=verts, faces=faces, process=False))

    print(f"  Wall Mesh Summary: Gen={len(all_wall_meshes)}, Skip={skip_count}")
    if not all_wall_meshes:
        raise RuntimeError("No valid wall meshes generated.")

    meshes = list(all_wall_meshes)
    if base_height > const.GEOMETRY_TOLERANCE:
        # Extend the plate under the outer walls
        plate_width = grid.cols * cell_size + wall_thickness
        plate_depth = grid.rows * cell_size + wall_thickness
        print(f"  Creating base plate {plate_width:.3f} x {plate_depth:.3f}...")
        base_mesh = trimesh.creation.box(extents=[plate_width, plate_depth, base_height])
        base_mesh.apply_translation(
            [grid.cols * cell_size / 2.0, grid.rows * cell_size / 2.0, -base_height / 2.0]
        )
        meshes.append(base_mesh)
    else:
        print("  Skipping base plate creation.")

    final_mesh = trimesh.util.concatenate(meshes)
    final_mesh.merge_vertices()
    print(f"  Combined Mesh: {len(final_mesh.vertices)}V, {len(final_mesh.faces)}F")
    return final_mesh


def create_2d_maze_stl(
    grid: RectGrid,
    output_filename: str,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
    cell_size: float = const.DEFAULT_CELL_SIZE,
) -> Optional[trimesh.Trimesh]:
    """Creates an STL file for the maze walls with a solid base; returns the mesh or None on failure."""
    print(f"\n--- Generating 2D Maze STL with Base: {output_filename} ---")
    try:
        final_mesh = build_maze_mesh(grid, wall_thickness, wall_height, base_height, cell_size)
    except (ValueError, RuntimeError) as e:
        print(f"ERROR: Cannot create 2D STL: {e}")
        return None

    print(f"  Exporting final 2D maze to {output_filename}...")
    try:
        final_mesh.export(output_filename)
        print("  Export complete.")
    except Exception as e:
        print(f"ERROR during final 2D mesh export: {e}")
        traceback.print_exc()
        return None
    return final_mesh
