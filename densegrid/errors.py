# densegrid/errors.py
from __future__ import annotations


class GridError(Exception):
    """Base class for every error raised by densegrid."""


class InvalidSize(GridError, ValueError):
    def __init__(self, width: int, height: int):
        super().__init__(f"Grid dimensions must be non-negative, got width={width} height={height}")
        self.width = width
        self.height = height


class OutOfBounds(GridError, IndexError):
    pass


class ArraySizeMismatch(GridError, ValueError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} values, got {actual}")
        self.expected = expected
        self.actual = actual


class UnterminatedLine(GridError, ValueError):
    pass
