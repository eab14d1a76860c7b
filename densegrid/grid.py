from __future__ import annotations

import logging
from typing import Any, Final, Generic, Iterator, List, Optional, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

import numpy as np

from densegrid.bounds import exclusive_invalid, inclusive_invalid
from densegrid.errors import ArraySizeMismatch, InvalidSize, OutOfBounds, UnterminatedLine
from densegrid.render import render

T = TypeVar("T")

HASH_MULTIPLIER: Final = 7
HASH_MASK: Final = (1 << 64) - 1

logger = logging.getLogger(__name__)


@runtime_checkable
class GridLike(Protocol):
    """Anything that exposes dimensions and cell lookup can be compared to a Grid."""

    @property
    def height(self) -> int: ...

    @property
    def width(self) -> int: ...

    def get(self, row: int, col: int) -> Any: ...


def _filled(shape: Tuple[int, int], value: Any) -> np.ndarray:
    # Element-wise stores keep sequence values from being broadcast.
    out = np.empty(shape, dtype=object)
    for idx in np.ndindex(*shape):
        out[idx] = value
    return out


def _vector(values: Sequence[Any]) -> np.ndarray:
    out = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        out[i] = value
    return out


def _line_points(
    start_row: int, start_col: int, delta_row: int, delta_col: int,
    end_row: int, end_col: int, height: int, width: int,
) -> List[Tuple[int, int]]:
    points: List[Tuple[int, int]] = []
    r, c = start_row, start_col
    while True:
        if inclusive_invalid(r, height) or inclusive_invalid(c, width):
            raise OutOfBounds(f"Line leaves grid at ({r}, {c}) for shape {(height, width)}")
        points.append((r, c))
        r += delta_row
        c += delta_col
        if r == end_row or c == end_col:
            return points
        if delta_row == 0 and delta_col == 0:
            raise UnterminatedLine(
                f"Line from ({start_row}, {start_col}) with zero step never reaches row {end_row} or col {end_col}"
            )


class Grid(Generic[T]):
    """Mutable dense height x width table of arbitrary values.

    Cells live in a numpy object array. Structural edits build a new array
    and rebind it, so the storage always matches the current dimensions.
    """

    __slots__ = ("_cells", "_default")

    def __init__(self, width: int, height: int, default: Optional[T] = None):
        if width < 0 or height < 0:
            raise InvalidSize(width, height)
        self._default = default
        self._cells = _filled((height, width), default)

    @classmethod
    def _wrap(cls, cells: np.ndarray, default: Optional[T]) -> Grid[T]:
        grid = cls.__new__(cls)
        grid._cells = cells
        grid._default = default
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], default: Optional[T] = None) -> Grid[T]:
        height = len(rows)
        width = len(rows[0]) if height else 0
        cells = np.empty((height, width), dtype=object)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ArraySizeMismatch(width, len(row))
            for c, value in enumerate(row):
                cells[r, c] = value
        return cls._wrap(cells, default)

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    @property
    def default(self) -> Optional[T]:
        return self._default

    def _check_cell(self, row: int, col: int) -> None:
        if inclusive_invalid(row, self.height) or inclusive_invalid(col, self.width):
            raise OutOfBounds(f"Index ({row}, {col}) out of bounds for shape {self.shape}")

    def get(self, row: int, col: int) -> T:
        self._check_cell(row, col)
        return self._cells[row, col]

    def set(self, row: int, col: int, val: T) -> None:
        self._check_cell(row, col)
        self._cells[row, col] = val

    def __getitem__(self, key: Tuple[int, int]) -> T:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], val: T) -> None:
        row, col = key
        self.set(row, col, val)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def insert_row(self, row: int, vals: Optional[Sequence[T]] = None) -> None:
        if exclusive_invalid(row, self.height):
            raise OutOfBounds(f"Row {row} is not an insertion position for height {self.height}")
        if vals is None:
            new_row = _filled((1, self.width), self._default)
        else:
            if len(vals) != self.width:
                raise ArraySizeMismatch(self.width, len(vals))
            new_row = _vector(vals).reshape(1, self.width)
        self._cells = np.concatenate((self._cells[:row], new_row, self._cells[row:]), axis=0)
        logger.debug("insert_row | row=%d height=%d", row, self.height)

    def insert_col(self, col: int, vals: Optional[Sequence[T]] = None) -> None:
        if exclusive_invalid(col, self.width):
            raise OutOfBounds(f"Column {col} is not an insertion position for width {self.width}")
        if vals is None:
            new_col = _filled((self.height, 1), self._default)
        else:
            if len(vals) != self.height:
                raise ArraySizeMismatch(self.height, len(vals))
            new_col = _vector(vals).reshape(self.height, 1)
        self._cells = np.concatenate((self._cells[:, :col], new_col, self._cells[:, col:]), axis=1)
        logger.debug("insert_col | col=%d width=%d", col, self.width)

    def delete_row(self, row: int) -> None:
        if inclusive_invalid(row, self.height):
            raise OutOfBounds(f"Row {row} out of bounds for height {self.height}")
        self._cells = np.delete(self._cells, row, axis=0)
        logger.debug("delete_row | row=%d height=%d", row, self.height)

    def delete_col(self, col: int) -> None:
        if inclusive_invalid(col, self.width):
            raise OutOfBounds(f"Column {col} out of bounds for width {self.width}")
        self._cells = np.delete(self._cells, col, axis=1)
        logger.debug("delete_col | col=%d width=%d", col, self.width)

    # ------------------------------------------------------------------
    # Fills
    # ------------------------------------------------------------------

    def _check_fill_start(self, start_row: int, start_col: int, end_row: int) -> None:
        if start_row < 0 or end_row > self.height:
            raise OutOfBounds(f"Rows {start_row}..{end_row} out of bounds for height {self.height}")
        if start_col < 0 or start_col > self.width:
            raise OutOfBounds(f"Start column {start_col} out of bounds for width {self.width}")

    def fill_region(self, start_row: int, start_col: int, end_row: int, end_col: int, val: T) -> None:
        self._check_fill_start(start_row, start_col, end_row)
        if end_col > self.width:
            raise OutOfBounds(f"End column {end_col} out of bounds for width {self.width}")
        if end_row <= start_row or end_col <= start_col:
            return
        self._cells[start_row:end_row, start_col:end_col] = _filled(
            (end_row - start_row, end_col - start_col), val
        )
        logger.debug("fill_region | rows=%d..%d cols=%d..%d", start_row, end_row, start_col, end_col)

    def fill_line(
        self,
        start_row: int,
        start_col: int,
        delta_row: int,
        delta_col: int,
        end_row: int,
        end_col: int,
        val: T,
    ) -> None:
        """Set every cell on a stepped walk from (start_row, start_col).

        The first cell is always written. After each step the walk stops if
        the row equals ``end_row`` or the column equals ``end_col``; ends are
        compared for equality, so an end the walk steps over is never hit.
        The whole walk is checked before any cell is written: leaving the grid
        raises OutOfBounds, and a zero step that never terminates raises
        UnterminatedLine.
        """
        self._check_fill_start(start_row, start_col, end_row)
        points = _line_points(
            start_row, start_col, delta_row, delta_col, end_row, end_col, self.height, self.width
        )
        for r, c in points:
            self._cells[r, c] = val
        logger.debug("fill_line | start=(%d, %d) cells=%d", start_row, start_col, len(points))

    # ------------------------------------------------------------------
    # Copying, export and comparison
    # ------------------------------------------------------------------

    def clone(self) -> Grid[T]:
        return self._wrap(self._cells.copy(), self._default)

    copy = clone

    def __copy__(self) -> Grid[T]:
        return self.clone()

    def rows(self) -> Iterator[List[T]]:
        for row in self._cells:
            yield list(row)

    def __iter__(self) -> Iterator[List[T]]:
        return self.rows()

    def to_list(self) -> List[List[T]]:
        return list(self.rows())

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def equals(self, other: object) -> bool:
        if not isinstance(other, GridLike):
            return False
        if self.height != other.height or self.width != other.width:
            return False
        if isinstance(other, Grid):
            return all(a == b for a, b in zip(self._cells.flat, other._cells.flat))
        for (r, c), value in np.ndenumerate(self._cells):
            if not value == other.get(r, c):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def hash_code(self) -> int:
        """Row-major hash of the dimensions and every non-None cell."""
        code = self.width + HASH_MULTIPLIER * self.height
        for value in self._cells.flat:
            if value is not None:
                code = (code * HASH_MULTIPLIER + hash(value)) & HASH_MASK
        return code

    def __hash__(self) -> int:
        return self.hash_code()

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape})"

    def __str__(self) -> str:
        return render(self)
