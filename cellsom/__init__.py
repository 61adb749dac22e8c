"""
cellsom - A Self-Organizing Map (SOM) library built from cells, a pluggable
calculator and an iterative trainer.
"""
from .errors import (
    SOMError,
    DimensionMismatch,
    IndexOutOfRange,
    KeyNotFound,
    InvalidIterationCount,
    EmptyInputSet,
    BMUNotFound,
)
from .vector import Vector
from .cell import AttributeValue, Position, Cell
from .map import Map
from .distance import pdist, euclidean_distance, manhattan_distance, chebyshev_distance
from .calculator import Calculator, GridCalculator
from .trainer import Trainer, TrainerState, find_bmu, quantization_error
from .log import get_logger

__version__ = "0.1.0" # Initial version

__all__ = [
    "SOMError",
    "DimensionMismatch",
    "IndexOutOfRange",
    "KeyNotFound",
    "InvalidIterationCount",
    "EmptyInputSet",
    "BMUNotFound",
    "Vector",
    "AttributeValue",
    "Position",
    "Cell",
    "Map",
    "pdist",
    "euclidean_distance",
    "manhattan_distance",
    "chebyshev_distance",
    "Calculator",
    "GridCalculator",
    "Trainer",
    "TrainerState",
    "find_bmu",
    "quantization_error",
    "get_logger",
]
