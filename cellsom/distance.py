import torch

from .vector import Vector


__all__ = [
    "pdist",
    "euclidean_distance",
    "manhattan_distance",
    "chebyshev_distance",
]


def pdist(a: Vector, b: Vector, p: float = 2) -> float:
    """
    Calculates the distance of order `p` between `a` and `b`.

    Parameters
    ----------
    a : Vector
        The first vector
    b : Vector
        The second vector
    p : float default=2
        The order. `float('inf')` gives the Chebyshev distance.
    """
    # `sub` raises DimensionMismatch on unequal dimensions
    return torch.linalg.vector_norm(a.sub(b).to_tensor(), ord=p).item()


def euclidean_distance(a: Vector, b: Vector) -> float:
    """Calculates the Euclidean (order 2) distance between `a` and `b`."""
    return pdist(a, b, p=2)


def manhattan_distance(a: Vector, b: Vector) -> float:
    """Calculates the Manhattan (order 1) distance between `a` and `b`."""
    return pdist(a, b, p=1)


def chebyshev_distance(a: Vector, b: Vector) -> float:
    return pdist(a, b, p=float("inf"))
