import enum
import math
import numbers
from typing import Callable, List, Optional, Sequence

import torch

from .calculator import Calculator
from .cell import Cell, Position
from .errors import BMUNotFound, EmptyInputSet, InvalidIterationCount
from .log import get_logger
from .map import Map
from .vector import Vector


__all__ = [
    "TrainerState",
    "Trainer",
    "find_bmu",
    "quantization_error",
]


MapCallback = Callable[[Map], None]


class TrainerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


def find_bmu(som_map: Map, calculator: Calculator, vector: Vector) -> Cell:
    """
    Finds the Best Matching Unit of `vector` in `som_map`.

    The first cell, in traversal order, whose distance is strictly less than
    every earlier one wins, so ties go to the cell constructed first.

    Raises:
        BMUNotFound: if the map is empty or no distance compares below infinity.
    """
    min_distance = math.inf
    bmu = None
    for cell in som_map:
        d = calculator.distance_of(cell.weight, vector)
        if d < min_distance:
            min_distance = d
            bmu = cell
    if bmu is None:
        raise BMUNotFound(f"no finite distance among {len(som_map)} cells")
    return bmu


def quantization_error(som_map: Map, calculator: Calculator, inputs: Sequence[Vector]) -> float:
    """
    Calculates the quantization error of `som_map` for `inputs`.
    Quantization error is the average distance between each input and its BMU.
    """
    inputs = list(inputs)
    if not inputs:
        raise EmptyInputSet()
    total = 0.0
    for vector in inputs:
        total += calculator.distance_of(find_bmu(som_map, calculator, vector).weight, vector)
    return total / len(inputs)


class Trainer:
    """
    Trains a map one randomly sampled input at a time.

    Each iteration picks an input uniformly at random (with replacement),
    finds its Best Matching Unit and pulls every cell within the current
    neighbourhood radius toward the input:

        W(t+1) = W(t) + THETA(t) * L(t) * (V(t) - W(t))

    where THETA is the calculator's influence, L its learning rate and V the
    sampled input. Weights are updated in place; the map passed to the
    callbacks is the live map, not a copy.

    A trainer owns its random generator, so two trainers never share
    sampling state and a seeded trainer replays the same run.
    """

    def __init__(self,
                 som_map: Map,
                 calculator: Calculator,
                 generator: Optional[torch.Generator] = None,
                 seed: Optional[int] = None
                ):
        """
        Args:
            som_map (Map): The map to train. Its cells are mutated in place.
            calculator (Calculator): Distances, decay schedules and influence.
            generator (torch.Generator | None): Sampling source. A new one is
                                                created if None.
            seed (int | None): Seed applied to the generator.
        """
        self.map = som_map
        self.calculator = calculator
        self.generator = generator if generator is not None else torch.Generator()
        if seed is not None:
            self.generator.manual_seed(seed)
        self.logger = get_logger(self)

        self._inputs: List[Vector] = []
        self._total_iterations = 0
        self._iteration = 0
        self._state = TrainerState.IDLE

    @property
    def state(self) -> TrainerState:
        return self._state

    @property
    def iteration(self) -> int:
        """The iteration currently running, or the last one that ran."""
        return self._iteration

    @property
    def total_iterations(self) -> int:
        return self._total_iterations

    def start(self,
              inputs: Sequence[Vector],
              iterations: int,
              on_complete: Optional[MapCallback] = None,
              on_step: Optional[MapCallback] = None
             ) -> Map:
        """
        Runs a training of `iterations` iterations over `inputs`.

        Args:
            inputs (Sequence[Vector]): Training data, all of the map's weight dimension.
            iterations (int): Number of iterations, must be positive.
            on_complete (Callable[[Map], None] | None): Called once with the map
                                                        after the last iteration.
            on_step (Callable[[Map], None] | None): Called with the map before
                                                    each iteration updates it.

        Returns:
            Map: The trained map.
        """
        if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral) or iterations <= 0:
            raise InvalidIterationCount(iterations)
        iterations = int(iterations)
        inputs = list(inputs)
        if not inputs:
            raise EmptyInputSet()

        self._inputs = inputs
        self._total_iterations = iterations
        self._iteration = 0
        self._state = TrainerState.RUNNING
        self.logger.info("Training %d cells on %d inputs for %d iterations",
                         len(self.map), len(inputs), iterations)

        try:
            for i in range(1, iterations + 1):
                self._iteration = i
                if on_step is not None:
                    on_step(self.map)
                self._apply_input(i)
        except Exception:
            self._state = TrainerState.IDLE
            self.logger.error("Training aborted at iteration %d of %d", self._iteration, iterations)
            raise

        self._state = TrainerState.COMPLETE
        self.logger.info("Training finished after %d iterations", iterations)
        if on_complete is not None:
            on_complete(self.map)
        return self.map

    def _choice(self) -> Vector:
        """Randomly chooses one of the inputs."""
        i = torch.randint(len(self._inputs), (1,), generator=self.generator).item()
        return self._inputs[i]

    def _apply_input(self, iteration: int):
        """Performs one iteration of training."""
        vector = self._choice()
        bmu = find_bmu(self.map, self.calculator, vector)
        radius = self.calculator.neighbourhood_radius(iteration, self._total_iterations)
        self.logger.debug("Iteration %d: BMU at (%d, %d), radius %.4f",
                          iteration, bmu.x, bmu.y, radius)

        for cell in self.map:
            distance = self.calculator.map_distance_of(cell, bmu)
            # Cells exactly on the radius are left out
            if distance < radius:
                self._adjust_cell_weight(cell, vector, distance, radius, iteration)

    def _adjust_cell_weight(self, cell: Cell, vector: Vector, distance: float, radius: float, iteration: int):
        theta = self.calculator.influence(cell, distance, radius)
        rate = self.calculator.learning_rate(iteration, self._total_iterations)
        cell.weight.add_(vector.sub(cell.weight).mul_(theta * rate))

    def map_to_bmu(self, inputs: Sequence[Vector]) -> List[Cell]:
        """Maps each input to its Best Matching Unit."""
        return [find_bmu(self.map, self.calculator, vector) for vector in inputs]

    def map_to_positions(self, inputs: Sequence[Vector]) -> List[Position]:
        """Maps each input to the grid position of its Best Matching Unit."""
        return [cell.position for cell in self.map_to_bmu(inputs)]

    def quantization_error(self, inputs: Sequence[Vector]) -> float:
        return quantization_error(self.map, self.calculator, inputs)

    def __repr__(self) -> str:
        return f"Trainer(map={self.map!r}, calculator={self.calculator!r}, state={self._state.value})"
