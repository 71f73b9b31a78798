# grid.py
from typing import Iterator, Tuple

Cell = Tuple[int, int]
Heading = Tuple[int, int]


def in_bounds(cell: Cell, size: int) -> bool:
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def step(cell: Cell, heading: Heading) -> Cell:
    return (cell[0] + heading[0], cell[1] + heading[1])


def is_opposite(a: Heading, b: Heading) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def all_cells(size: int) -> Iterator[Cell]:
    """Row-major walk over every cell of the board."""
    for y in range(size):
        for x in range(size):
            yield (x, y)
