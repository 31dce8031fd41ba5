import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Cell:
    """A single maze cell: its index and one wall flag per side (True = closed)."""

    __slots__ = ('index', 'walls')

    def __init__(self, index: int, sides: int):
        self.index = index
        self.walls: List[bool] = [True] * sides

    def close_all(self):
        for side in range(len(self.walls)):
            self.walls[side] = True

    def is_open(self, side: int) -> bool:
        return not self.walls[side]

    def __repr__(self):
        return f"Cell({self.index}, walls={self.walls})"


class Maze(ABC):
    """
    Cell-and-wall topology, independent of any generation algorithm.

    Subclasses own the cell storage and define how a side of one cell maps
    onto the facing side of its neighbour. Generators only ever talk to
    this interface.
    """

    SIDES = 0

    def __init__(self, count: int):
        self.cells: List[Cell] = [Cell(i, self.SIDES) for i in range(count)]

    def cell_count(self) -> int:
        return len(self.cells)

    def cell(self, index: int) -> Cell:
        if 0 <= index < len(self.cells):
            return self.cells[index]
        raise IndexError(f"Cell {index} out of range [0, {len(self.cells)})")

    def check_side(self, side: int):
        if not 0 <= side < self.SIDES:
            raise IndexError(f"Side {side} out of range [0, {self.SIDES})")

    @abstractmethod
    def navigate(self, index: int, side: int) -> Optional[Tuple[int, int]]:
        """
        Returns (neighbour_index, neighbour_side) across the given wall,
        or None when the wall lies on the boundary.
        """

    def close_all_walls(self):
        for cell in self.cells:
            cell.close_all()

    def open_wall(self, index: int, side: int) -> Tuple[int, int]:
        """
        Removes the wall on 'side' of cell 'index' and the facing wall of
        the neighbour.
        """
        target = self.navigate(index, side)
        if target is None:
            raise ValueError(f"Side {side} of cell {index} is a boundary wall")
        other, other_side = target
        self.cells[index].walls[side] = False
        self.cells[other].walls[other_side] = False
        return target

    def neighbors(self, index: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (neighbour_index, side, neighbour_side) for every side that
        has a neighbour. Does NOT check walls.
        """
        for side in range(self.SIDES):
            target = self.navigate(index, side)
            if target is not None:
                yield (target[0], side, target[1])

    def open_neighbors(self, index: int) -> Iterator[int]:
        walls = self.cell(index).walls
        for other, side, _ in self.neighbors(index):
            if not walls[side]:
                yield other

    def open_walls(self) -> Iterator[Tuple[int, int, int, int]]:
        """
        Yields every open wall once as (index, side, neighbour, neighbour_side),
        reported from the lower-indexed cell.
        """
        for cell in self.cells:
            for other, side, other_side in self.neighbors(cell.index):
                if other > cell.index and not cell.walls[side]:
                    yield (cell.index, side, other, other_side)


class SquareGrid(Maze):
    SIDES = 4

    # Side indexes
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    DX = {LEFT: -1, UP: 0, RIGHT: 1, DOWN: 0}
    DY = {LEFT: 0, UP: -1, RIGHT: 0, DOWN: 1}

    __slots__ = ('width', 'height')

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            logger.warning(f"Degenerate grid size {width}x{height}, using an empty grid")
            width, height = 0, 0
        self.width = width
        self.height = height
        super().__init__(width * height)

    @staticmethod
    def opposite(side: int) -> int:
        return (side + 2) % 4

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, index: int) -> Tuple[int, int]:
        self.cell(index)
        return index % self.width, index // self.width

    def navigate(self, index: int, side: int) -> Optional[Tuple[int, int]]:
        x, y = self.get_coords(index)
        self.check_side(side)

        if side == self.LEFT and x == 0:
            return None
        if side == self.UP and y == 0:
            return None
        if side == self.RIGHT and x == self.width - 1:
            return None
        if side == self.DOWN and y == self.height - 1:
            return None

        x += self.DX[side]
        y += self.DY[side]
        return y * self.width + x, self.opposite(side)
