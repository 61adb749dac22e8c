import numbers
from typing import Callable, Iterable, Iterator, Optional, Union

import torch

from .errors import DimensionMismatch, IndexOutOfRange


__all__ = [
    "Vector",
]


Scalar = Union[int, float]


class Vector:
    """
    A fixed-dimension vector of real numbers backed by a float64 tensor.

    Methods with a trailing underscore (`add_`, `sub_`, `mul_`, `div_`) mutate
    the receiver and return it, as torch in-place methods do. Their
    counterparts without the underscore leave both operands untouched and
    return a new Vector. Binary vector operations check dimensions before
    touching any data, so a failed call never leaves a half-updated operand.

    Division by zero is not checked: the result follows IEEE semantics
    (`inf` / `nan`).
    """

    __slots__ = ("_data",)

    def __init__(self, values: Union[Iterable[float], torch.Tensor]):
        """
        Creates a vector from `values`. Elements are copied.

        Args:
            values (Iterable[float] | torch.Tensor): Components, left to right.
        """
        if isinstance(values, torch.Tensor):
            data = values.detach().to(dtype=torch.float64).clone()
        else:
            data = torch.tensor(list(values), dtype=torch.float64)
        if data.dim() != 1:
            raise ValueError(f"Vector values must be one-dimensional. Got shape {tuple(data.shape)}")
        if data.shape[0] == 0:
            raise ValueError("Vector values must not be empty")
        self._data = data

    @classmethod
    def random(cls, dimension: int, generator: Optional[torch.Generator] = None) -> "Vector":
        """
        Creates a vector of `dimension` components drawn uniformly from [0, 1).

        Args:
            dimension (int): Number of components, must be positive.
            generator (torch.Generator | None): Source of randomness. Uses the
                                                global torch generator if None.
        """
        if not isinstance(dimension, int) or dimension <= 0:
            raise ValueError(f"Vector dimension must be a positive integer. Got {dimension!r}")
        return cls._wrap(torch.rand(dimension, dtype=torch.float64, generator=generator))

    @classmethod
    def zeros(cls, dimension: int) -> "Vector":
        if not isinstance(dimension, int) or dimension <= 0:
            raise ValueError(f"Vector dimension must be a positive integer. Got {dimension!r}")
        return cls._wrap(torch.zeros(dimension, dtype=torch.float64))

    @classmethod
    def _wrap(cls, data: torch.Tensor) -> "Vector":
        # Takes ownership of `data` without copying
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    def __len__(self) -> int:
        return self.dimension

    def _check_index(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"Vector indices must be integers. Got {type(index).__name__}")
        if index < 0 or index >= self.dimension:
            raise IndexOutOfRange(index, self.dimension)
        return int(index)

    def __getitem__(self, index: int) -> float:
        return self._data[self._check_index(index)].item()

    def __setitem__(self, index: int, value: Scalar):
        self._data[self._check_index(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        for i in range(self.dimension):
            yield self._data[i].item()

    def for_each(self, action: Optional[Callable[[float], None]]):
        """Calls `action` on each component in order. A None action does nothing."""
        if action is None:
            return
        for value in self:
            action(value)

    def _check_dimension(self, other: "Vector"):
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a Vector. Got {type(other).__name__}")
        if other.dimension != self.dimension:
            raise DimensionMismatch(self.dimension, other.dimension)

    # In-place operations

    def add_(self, other: "Vector") -> "Vector":
        """Adds `other` to this vector in place and returns this vector."""
        self._check_dimension(other)
        self._data.add_(other._data)
        return self

    def sub_(self, other: "Vector") -> "Vector":
        """Subtracts `other` from this vector in place and returns this vector."""
        self._check_dimension(other)
        self._data.sub_(other._data)
        return self

    def mul_(self, scalar: Scalar) -> "Vector":
        """Multiplies this vector by `scalar` in place and returns this vector."""
        self._data.mul_(float(scalar))
        return self

    def div_(self, scalar: Scalar) -> "Vector":
        """Divides this vector by `scalar` in place and returns this vector."""
        self._data.div_(float(scalar))
        return self

    # Pure operations

    def add(self, other: "Vector") -> "Vector":
        """Returns the sum of this vector and `other` as a new vector."""
        self._check_dimension(other)
        return Vector._wrap(torch.add(self._data, other._data))

    def sub(self, other: "Vector") -> "Vector":
        """Returns this vector minus `other` as a new vector."""
        self._check_dimension(other)
        return Vector._wrap(torch.sub(self._data, other._data))

    def mul(self, scalar: Scalar) -> "Vector":
        """Returns this vector multiplied by `scalar` as a new vector."""
        return Vector._wrap(torch.mul(self._data, float(scalar)))

    def div(self, scalar: Scalar) -> "Vector":
        """Returns this vector divided by `scalar` as a new vector."""
        return Vector._wrap(torch.div(self._data, float(scalar)))

    # Operators

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.mul(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.div(scalar)

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add_(other)

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub_(other)

    def __imul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.mul_(scalar)

    def __itruediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.div_(scalar)

    def __neg__(self) -> "Vector":
        return Vector._wrap(torch.neg(self._data))

    # Helpers

    def norm(self) -> float:
        """Returns the Euclidean length of this vector."""
        return torch.linalg.vector_norm(self._data).item()

    def copy(self) -> "Vector":
        return Vector._wrap(self._data.clone())

    def tolist(self) -> list:
        return self._data.tolist()

    def to_tensor(self) -> torch.Tensor:
        """Returns a detached copy of the underlying tensor."""
        return self._data.clone().detach()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return torch.equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return f"Vector({self.tolist()})"
