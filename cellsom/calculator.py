import math
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .cell import Cell
from .distance import euclidean_distance
from .log import get_logger
from .vector import Vector


__all__ = [
    "Calculator",
    "GridCalculator",
]


class Calculator(ABC):
    """
    The calculations a training run delegates to.

    Implementations must be pure: the trainer may call any method any number
    of times with the same arguments and expects the same result. Fixed
    configuration belongs in the constructor.
    """

    @abstractmethod
    def distance_of(self, x: Vector, y: Vector) -> float:
        """
        Calculates the distance between two vectors in weight space.

        Must be non-negative, symmetric, and zero only for identical vectors.
        """

    @abstractmethod
    def map_distance_of(self, x: Cell, y: Cell) -> float:
        """
        Calculates the distance between two cells on the map.

        This is derived from the cells' positions, not from their weights.
        """

    @abstractmethod
    def neighbourhood_radius(self, iteration: int, total: int) -> float:
        """
        Calculates the neighbourhood radius for `iteration` out of `total`.

        The radius starts near its maximum and decreases toward a small
        positive value as training progresses.
        """

    @abstractmethod
    def influence(self, cell: Cell, distance: float, radius: float) -> float:
        """
        Calculates how strongly the current input pulls on `cell`.

        Args:
            cell (Cell): A cell inside the neighbourhood.
            distance (float): Map distance between `cell` and the BMU.
            radius (float): The current neighbourhood radius.

        Returns:
            float: A value in [0, 1], equal to 1 at distance 0.
        """

    @abstractmethod
    def learning_rate(self, iteration: int, total: int) -> float:
        """Calculates the learning rate, in (0, 1], for `iteration` out of `total`."""


class GridCalculator(Calculator):
    """
    Exponentially decaying schedules over a rectangular grid.

    - distance_of: the configured vector metric (Euclidean by default)
    - map_distance_of: Euclidean distance between cell positions
    - neighbourhood_radius: max_radius * exp(-iteration / time_constant)
    - influence: Gaussian kernel exp(-distance^2 / radius^2)
    - learning_rate: max_learning_rate * exp(-iteration / total)

    With `time_constant = total / ln(max_radius)` the radius shrinks from
    `max_radius` to 1 over the run. Radii of 1 or less cannot reach 1 that
    way, so they decay with `time_constant = total` instead.
    """

    DEFAULT_MAX_LEARNING_RATE = 0.5

    def __init__(self,
                 width: int,
                 height: int,
                 max_learning_rate: float = DEFAULT_MAX_LEARNING_RATE,
                 max_radius: Optional[float] = None,
                 distance: Callable[[Vector, Vector], float] = euclidean_distance
                ):
        """
        Args:
            width (int): Number of map columns.
            height (int): Number of map rows.
            max_learning_rate (float): Learning rate at iteration 0, in (0, 1].
            max_radius (float | None): Neighbourhood radius at iteration 0.
                                       Defaults to half the shorter map side.
            distance (Callable[[Vector, Vector], float]): Vector metric.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive. Got ({width}, {height})")
        if not 0 < max_learning_rate <= 1:
            raise ValueError(f"max_learning_rate must be in (0, 1]. Got {max_learning_rate}")
        if max_radius is None:
            max_radius = min(width, height) / 2.0
        if not max_radius > 0:
            raise ValueError(f"max_radius must be positive. Got {max_radius}")

        self.width = width
        self.height = height
        self.max_learning_rate = float(max_learning_rate)
        self.max_radius = float(max_radius)
        self.distance = distance
        # Multiplied by `total` to get the radius time constant
        self.radius_constant = 1.0 / math.log(self.max_radius) if self.max_radius > 1 else 1.0

        get_logger(self).debug(
            "Grid %dx%d, max radius %.4f, radius constant %.4f, max learning rate %.4f",
            width, height, self.max_radius, self.radius_constant, self.max_learning_rate,
        )

    def distance_of(self, x: Vector, y: Vector) -> float:
        return self.distance(x, y)

    def map_distance_of(self, x: Cell, y: Cell) -> float:
        return math.hypot(x.x - y.x, x.y - y.y)

    def neighbourhood_radius(self, iteration: int, total: int) -> float:
        return self.max_radius * math.exp(-iteration / (total * self.radius_constant))

    def influence(self, cell: Cell, distance: float, radius: float) -> float:
        return math.exp(-(distance ** 2) / (radius ** 2))

    def learning_rate(self, iteration: int, total: int) -> float:
        return self.max_learning_rate * math.exp(-iteration / total)

    def __repr__(self) -> str:
        return (f"GridCalculator(width={self.width}, height={self.height}, "
                f"max_learning_rate={self.max_learning_rate}, max_radius={self.max_radius})")
