from typing import Callable, Iterable, Iterator, Optional

import torch

from .cell import Cell
from .errors import KeyNotFound
from .vector import Vector


__all__ = [
    "Map",
]


class Map:
    """
    A fixed collection of cells.

    Cells are stored and traversed in construction order. The collection is
    never resized; training mutates the cells' weight vectors in place.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell]):
        self._cells = tuple(cells)
        for cell in self._cells:
            if not isinstance(cell, Cell):
                raise TypeError(f"Map cells must be Cell instances. Got {type(cell).__name__}")

    @classmethod
    def grid(cls,
             width: int,
             height: int,
             dimension: int,
             generator: Optional[torch.Generator] = None
            ) -> "Map":
        """
        Builds a `width` x `height` map of cells with random weights.

        Cells are created column by column (x outer, y inner), so that is also
        the traversal order.

        Args:
            width (int): Number of columns.
            height (int): Number of rows.
            dimension (int): Dimension of each weight vector.
            generator (torch.Generator | None): Source of randomness for the weights.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive. Got ({width}, {height})")
        return cls(
            Cell(Vector.random(dimension, generator=generator), (x, y))
            for x in range(width)
            for y in range(height)
        )

    def for_each_cell(self, action: Optional[Callable[[Cell], None]]):
        """Performs `action` on each cell in traversal order. A None action does nothing."""
        if action is None:
            return
        for cell in self._cells:
            action(cell)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def cell_at(self, x: int, y: int) -> Cell:
        """Returns the first cell positioned at (x, y). Raises KeyNotFound if there is none."""
        for cell in self._cells:
            if cell.x == x and cell.y == y:
                return cell
        raise KeyNotFound((x, y))

    def weights(self) -> torch.Tensor:
        """Returns a copy of all weights as a tensor of shape (num_cells, dimension)."""
        if not self._cells:
            return torch.empty(0, 0, dtype=torch.float64)
        return torch.stack([cell.weight.to_tensor() for cell in self._cells])

    def copy(self) -> "Map":
        """Returns a snapshot of this map whose cells do not share weights with it."""
        return Map(cell.copy() for cell in self._cells)

    def __repr__(self) -> str:
        return f"Map(num_cells={len(self._cells)})"
