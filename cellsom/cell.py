import numbers
from typing import Dict, Mapping, NamedTuple, Optional, Tuple, Union

from .errors import KeyNotFound
from .vector import Vector


__all__ = [
    "AttributeValue",
    "Position",
    "Cell",
]


AttributeValue = Union[bool, int, float, str]

_ATTRIBUTE_TYPES = (bool, int, float, str)


class Position(NamedTuple):
    """Integer grid coordinates of a cell."""
    x: int
    y: int


class Cell:
    """
    A node of the map.

    A cell owns its weight vector, a grid position fixed at construction and
    a bag of named auxiliary attributes. The position defines the topology
    the calculator's map distance works on, so it cannot be reassigned.
    """

    __slots__ = ("_weight", "_position", "_attributes")

    def __init__(self,
                 weight: Vector,
                 position: Tuple[int, int] = (0, 0),
                 attributes: Optional[Mapping[str, AttributeValue]] = None
                ):
        """
        Args:
            weight (Vector): The weight vector. It is owned, not copied.
            position (tuple[int, int]): Grid coordinates (x, y) of the cell.
            attributes (Mapping[str, AttributeValue] | None): Initial attributes.
        """
        if not isinstance(weight, Vector):
            raise TypeError(f"Cell weight must be a Vector. Got {type(weight).__name__}")
        x, y = position
        for coordinate in (x, y):
            if isinstance(coordinate, bool) or not isinstance(coordinate, numbers.Integral):
                raise TypeError(f"Cell coordinates must be integers. Got {type(coordinate).__name__}")
        self._weight = weight
        self._position = Position(int(x), int(y))
        self._attributes: Dict[str, AttributeValue] = {}
        for key, value in (attributes or {}).items():
            self.set(key, value)

    @property
    def weight(self) -> Vector:
        return self._weight

    @property
    def position(self) -> Position:
        return self._position

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    @property
    def attributes(self) -> Dict[str, AttributeValue]:
        """A copy of the attribute mapping."""
        return dict(self._attributes)

    def get(self, key: str) -> AttributeValue:
        """Returns the attribute stored under `key`. Raises KeyNotFound if absent."""
        try:
            return self._attributes[key]
        except KeyError:
            raise KeyNotFound(key) from None

    def set(self, key: str, value: AttributeValue):
        """Stores `value` under `key`, overwriting any previous value."""
        if not isinstance(key, str):
            raise TypeError(f"Attribute keys must be strings. Got {type(key).__name__}")
        if not isinstance(value, _ATTRIBUTE_TYPES):
            raise TypeError(
                f"Attribute {key!r} must be one of bool, int, float or str. Got {type(value).__name__}"
            )
        self._attributes[key] = value

    __getitem__ = get
    __setitem__ = set

    def __contains__(self, key) -> bool:
        return key in self._attributes

    def copy(self) -> "Cell":
        """Returns a copy of this cell with its own weight vector."""
        return Cell(self._weight.copy(), self._position, self._attributes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (self._position == other._position
                and self._weight == other._weight
                and self._attributes == other._attributes)

    def __hash__(self) -> int:
        return hash((self._weight, self._position, frozenset(self._attributes.items())))

    def __repr__(self) -> str:
        return f"Cell(weight={self._weight!r}, position=({self.x}, {self.y}), attributes={self._attributes!r})"
