import logging


__all__ = [
    "getname",
    "get_logger",
]


def getname(o) -> str:
    """Returns the class name of `o`, or `o` itself if it is already a name."""
    if isinstance(o, str):
        return o
    cls = o if isinstance(o, type) else o.__class__
    return f"{cls.__module__}.{cls.__qualname__}"


def get_logger(o) -> logging.Logger:
    """
    Returns the logger for `o`.

    Args:
        o: A logger name (usually `__name__`), a class or an instance.
    """
    return logging.getLogger(getname(o))
