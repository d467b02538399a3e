import matplotlib

matplotlib.use("Agg")

import pytest

from grid_core import RectGrid, neighbor_coordinate
from solver import passage_distances
import constants as const


class FirstChoiceRandom:
    """Scripted RNG: always the first candidate, always index 0 for randrange."""

    def randrange(self, n):
        return 0

    def choice(self, seq):
        return seq[0]


class LastChoiceRandom:
    """Scripted RNG: always the last candidate, always n - 1 for randrange."""

    def randrange(self, n):
        return n - 1

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def first_choice_rng():
    return FirstChoiceRandom()


@pytest.fixture
def last_choice_rng():
    return LastChoiceRandom()


def assert_walls_symmetric(grid: RectGrid):
    for cell in grid.get_all_cells():
        for direction in const.DIRECTIONS:
            neighbour = grid.get(*neighbor_coordinate(cell.row, cell.col, direction))
            if neighbour is None:
                assert cell.walls[direction], f"boundary wall {direction} of {cell.id} is open"
            else:
                assert cell.walls[direction] == neighbour.walls[const.OPPOSITE[direction]]


def assert_spanning_tree(grid: RectGrid):
    assert grid.passage_count() == grid.rows * grid.cols - 1
    distances = passage_distances(grid, (0, 0))
    assert (distances >= 0).all()
