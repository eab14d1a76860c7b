from .grid import Grid, GridLike
from .bounds import exclusive_invalid, inclusive_invalid
from .errors import ArraySizeMismatch, GridError, InvalidSize, OutOfBounds, UnterminatedLine
from .render import render

__all__ = [
    "Grid",
    "GridLike",
    "exclusive_invalid",
    "inclusive_invalid",
    "GridError",
    "InvalidSize",
    "OutOfBounds",
    "ArraySizeMismatch",
    "UnterminatedLine",
    "render",
]
