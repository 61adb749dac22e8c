"""
Exception hierarchy for cellsom.

Every error derives from SOMError and from the builtin exception that best
describes it, so callers can catch either the library-specific type or the
usual builtin.
"""


class SOMError(Exception):
    """Base exception for all cellsom errors."""


class DimensionMismatch(SOMError, ValueError):
    """Raised when two vectors of different dimension meet in one operation."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Vector dimensions do not match: {left} != {right}")


class IndexOutOfRange(SOMError, IndexError):
    """Raised on component access outside `[0, dimension)`."""

    def __init__(self, index: int, dimension: int):
        self.index = index
        self.dimension = dimension
        super().__init__(f"Index {index} out of range for vector of dimension {dimension}")


class KeyNotFound(SOMError, KeyError):
    """Raised when reading a cell attribute (or locating a cell) that does not exist."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key {key!r} not found")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class InvalidIterationCount(SOMError, ValueError):
    """Raised when a training run is requested with a non-positive iteration count."""

    def __init__(self, iterations):
        self.iterations = iterations
        super().__init__(f"Number of iterations must be a positive integer. Got {iterations!r}")


class EmptyInputSet(SOMError, ValueError):
    """Raised when a training run is requested without any input vectors."""

    def __init__(self):
        super().__init__("Input set is empty, nothing to sample from")


class BMUNotFound(SOMError, RuntimeError):
    """Raised when no cell yields a comparable distance to the input."""

    def __init__(self, detail: str):
        super().__init__(f"Best matching unit not found: {detail}")
