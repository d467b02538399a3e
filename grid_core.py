# grid_core.py
import random
from typing import Dict, Iterator, List, Optional, Tuple

# Import from other project modules
import constants as const

Coord = Tuple[int, int]


class InvalidDimensionsError(ValueError):
    """Raised when a grid is requested with a non-positive row or column count."""


class LinkError(ValueError):
    """Raised when link() is asked to join cells that are not neighbours in the given direction."""


def neighbor_coordinate(row: int, col: int, direction: str) -> Coord:
    """Returns the coordinate adjacent to (row, col) in `direction`. No bounds checking."""
    try:
        d_row, d_col = const.OFFSETS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction: {direction!r}") from None
    return row + d_row, col + d_col


class Cell:
    """Represents a single cell of the rectangular grid."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.id = f"{row},{col}"  # Display only; lookups use coords
        self.coords: Coord = (row, col)
        # Walls are shared edges, kept in sync by RectGrid.link
        self.walls: Dict[str, bool] = {d: True for d in const.DIRECTIONS}
        self._visited: bool = False  # Used by maze generation only

    def has_wall(self, direction: str) -> bool:
        return self.walls[direction]

    def mark_visited(self):
        """Marks the cell as visited (for algorithms)."""
        self._visited = True

    def unmark_visited(self):
        """Marks the cell as not visited."""
        self._visited = False

    def is_visited(self) -> bool:
        """Checks if the cell has been marked as visited."""
        return self._visited

    def __repr__(self) -> str:
        return f"Cell({self.id})"

    def __hash__(self):
        return hash(self.coords)

    def __eq__(self, other):
        return isinstance(other, Cell) and self.coords == other.coords


class RectGrid:
    """
    Fixed-size rectangular grid of cells stored in a flat, pre-allocated list
    (index = row * cols + col). Created fully walled and unvisited.
    """

    def __init__(self, rows: int, cols: int):
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensionsError(f"Grid {name} must be an integer, got {value!r}.")
            if value <= 0:
                raise InvalidDimensionsError(f"Grid {name} must be positive, got {value}.")

        self.rows = rows
        self.cols = cols
        self.cells: List[Cell] = [
            Cell(r, c) for r in range(rows) for c in range(cols)
        ]

    def get(self, row: int, col: int) -> Optional[Cell]:
        """Safely retrieves a cell; returns None outside [0, rows) x [0, cols)."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return None
        return self.cells[row * self.cols + col]

    def neighbours(self, cell: Cell) -> List[Tuple[str, Cell]]:
        """Lists (direction, neighbour) pairs in exploration order, skipping the grid edge."""
        found = []
        for direction in const.DIRECTIONS:
            neighbour = self.get(*neighbor_coordinate(cell.row, cell.col, direction))
            if neighbour is not None:
                found.append((direction, neighbour))
        return found

    def link(self, cell_a: Cell, cell_b: Cell, direction: str):
        """Opens the wall shared by cell_a (on `direction`) and cell_b (on the opposite side)."""
        if direction not in const.OPPOSITE:
            raise LinkError(f"Unknown direction: {direction!r}")
        if neighbor_coordinate(cell_a.row, cell_a.col, direction) != cell_b.coords:
            raise LinkError(
                f"{cell_b!r} is not the {direction} neighbour of {cell_a!r}."
            )
        cell_a.walls[direction] = False
        cell_b.walls[const.OPPOSITE[direction]] = False

    def passage_count(self) -> int:
        """Counts cleared wall pairs (each shared edge counted once)."""
        count = 0
        for cell in self.cells:
            if not cell.walls[const.DIR_RIGHT] and cell.col + 1 < self.cols:
                count += 1
            if not cell.walls[const.DIR_BOTTOM] and cell.row + 1 < self.rows:
                count += 1
        return count

    def reset(self):
        """Closes every wall and clears every visited flag."""
        for cell in self.cells:
            cell.unmark_visited()
            for direction in const.DIRECTIONS:
                cell.walls[direction] = True

    def random_cell(self, rng: Optional[random.Random] = None) -> Cell:
        """Returns a uniformly random cell (row drawn first, then column)."""
        rng = rng if rng is not None else random
        row = rng.randrange(self.rows)
        col = rng.randrange(self.cols)
        return self.cells[row * self.cols + col]

    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return len(self.cells)

    def get_all_cells(self) -> Iterator[Cell]:
        """Returns an iterator over all cells in row-major order."""
        yield from self.cells

    def __repr__(self) -> str:
        return f"RectGrid({self.rows}x{self.cols})"
