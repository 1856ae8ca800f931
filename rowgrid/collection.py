"""
Collection

Presents identifiable items in an ordered grid with a fixed column count.

Example:
    from rowgrid import make_grid, Text

    grid = make_grid(photos, columns=3, render=lambda photo: Text(photo.title))
    tree = grid.body()
"""

from __future__ import annotations
import numbers
from collections.abc import Hashable
from typing import Any, Callable, Dict, Iterable, List, Optional

from .config import DEFAULT_CONFIG, GridConfig
from .layout import LayoutGeometry, cell_frames
from .partition import Grid, partition, row_count, validate_columns
from .primitives import Area
from .views import HStack, Identified, View, VStack, ensure_view


def identity_of(item: Any) -> Hashable:
    """Default identity key: the item's `id` attribute."""
    try:
        return item.id
    except AttributeError:
        raise TypeError(
            f"{type(item).__name__} has no 'id' attribute; "
            "pass key= to identify items"
        ) from None


def validate_spacing(name: str, value: float) -> float:
    """Check a spacing value, returning it unchanged.

    Raises:
        TypeError: value is not a real number
        ValueError: value is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class Collection:
    """
    A grid of items filled row by row.

    Spacing values are kept for renderers but are not applied by the
    stack layout yet.
    """

    def __init__(
        self,
        data: Iterable[Any],
        render: Callable[[Any], View],
        columns: int = 2,
        vertical_spacing: Optional[float] = None,
        horizontal_spacing: Optional[float] = None,
        key: Optional[Callable[[Any], Hashable]] = None,
        config: Optional[GridConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.columns = validate_columns(columns)
        if not callable(render):
            raise TypeError("render must be callable")
        self.render = render
        self.key = key or identity_of
        self.data = tuple(data)
        self.keys = self._collect_keys()

        if vertical_spacing is None:
            vertical_spacing = self.config.small_margin
        if horizontal_spacing is None:
            horizontal_spacing = self.config.small_margin
        self.vertical_spacing = validate_spacing("vertical_spacing", vertical_spacing)
        self.horizontal_spacing = validate_spacing(
            "horizontal_spacing", horizontal_spacing
        )

    def _collect_keys(self) -> List[Hashable]:
        keys = []
        seen = set()
        for item in self.data:
            item_key = self.key(item)
            try:
                hash(item_key)
            except TypeError:
                raise TypeError(
                    f"identity key {item_key!r} of {type(item).__name__} "
                    "is not hashable"
                ) from None
            if item_key in seen:
                raise ValueError(f"duplicate identity key: {item_key!r}")
            seen.add(item_key)
            keys.append(item_key)
        return keys

    @property
    def row_count(self) -> int:
        return row_count(len(self.data), self.columns)

    def column_size(self, width: float) -> float:
        """Width of one column when `width` is shared by all columns."""
        return (width - self.horizontal_spacing * (self.columns - 1)) / self.columns

    def rows(self) -> Grid:
        """Partition the current data. Computed fresh on every call."""
        return partition(self.data, self.columns)

    def body(self) -> VStack:
        """
        Build the view tree: one HStack per row, stacked in a VStack.

        The render callback is called once per item in row-major order.
        """
        keyed = partition(tuple(zip(self.keys, self.data)), self.columns)
        return VStack(
            items=[
                HStack(
                    items=[
                        Identified(item_key, ensure_view(self.render(item)))
                        for item_key, item in row
                    ],
                    spacing=self.horizontal_spacing,
                    slots=self.columns,
                )
                for row in keyed
            ],
            spacing=self.vertical_spacing,
        )

    def layout(self, area: Area) -> Dict[Hashable, LayoutGeometry]:
        """Frames of every item cell inside `area`, keyed by identity."""
        return cell_frames(self.body(), area)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Collection(items={len(self.data)}, columns={self.columns})"


def make_grid(
    items: Iterable[Any],
    render: Callable[[Any], View],
    columns: int = 2,
    vertical_spacing: Optional[float] = None,
    horizontal_spacing: Optional[float] = None,
    key: Optional[Callable[[Any], Hashable]] = None,
    config: Optional[GridConfig] = None,
) -> Collection:
    """Create a Collection. Spacing defaults to the configured small margin."""
    return Collection(
        items,
        render,
        columns=columns,
        vertical_spacing=vertical_spacing,
        horizontal_spacing=horizontal_spacing,
        key=key,
        config=config,
    )
