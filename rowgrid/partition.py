"""
Row Partitioning

Splits an ordered sequence of items into rows of a fixed column count,
filling each row completely before starting the next.
"""

from __future__ import annotations
import operator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

Row = Tuple[Any, ...]


def validate_columns(columns: int) -> int:
    """Check a column count, returning it as a plain int.

    Any integer type is accepted (anything implementing `__index__`),
    except bool.

    Raises:
        TypeError: columns is not an integer
        ValueError: columns is less than 1
    """
    if isinstance(columns, bool):
        raise TypeError("columns must be an int, got bool")
    try:
        columns = operator.index(columns)
    except TypeError:
        raise TypeError(
            f"columns must be an int, got {type(columns).__name__}"
        ) from None
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")
    return columns


def row_count(count: int, columns: int) -> int:
    """Number of rows needed for `count` items."""
    columns = validate_columns(columns)
    return (count + columns - 1) // columns


def _as_sequence(items: Iterable[Any]) -> Sequence:
    if isinstance(items, Sequence):
        return items
    return tuple(items)


def _rows(items: Sequence, columns: int) -> Iterator[Row]:
    n = len(items)
    start = 0
    while start < n:
        end = min(start + columns, n)
        yield tuple(items[start:end])
        start = end


def iter_rows(items: Iterable[Any], columns: int) -> Iterator[Row]:
    """
    Lazily yield the rows of `items`.

    The column count is checked when this is called, not on the first
    `next()`, so a bad configuration never yields a partial result.
    """
    columns = validate_columns(columns)
    return _rows(_as_sequence(items), columns)


@dataclass(frozen=True)
class Grid:
    """Rows produced by one partitioning pass."""

    rows: Tuple[Row, ...]
    columns: int

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index):
        return self.rows[index]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def item_count(self) -> int:
        return sum(len(row) for row in self.rows)

    def flatten(self) -> Tuple[Any, ...]:
        """Items in row-major order."""
        return tuple(item for row in self.rows for item in row)


def partition(items: Iterable[Any], columns: int) -> Grid:
    """
    Partition items into a Grid.

    Args:
        items: Ordered items; insertion order decides placement
        columns: Items per row, at least 1

    Returns:
        Grid whose rows all hold `columns` items except possibly the last
    """
    columns = validate_columns(columns)
    return Grid(rows=tuple(iter_rows(items, columns)), columns=columns)
