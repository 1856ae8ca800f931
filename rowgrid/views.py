"""
View Tree

Render instructions produced by a collection: containers that arrange their
children and leaves that know how to paint themselves with Cairo.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, List, Optional, TYPE_CHECKING
import cairo

from .config import Color, parse_color

if TYPE_CHECKING:
    from .config import GridConfig
    from .layout import LayoutGeometry


def set_color(ctx: cairo.Context, color: Color):
    """Set Cairo color from an RGBA tuple with values 0-255."""
    r, g, b, a = color
    ctx.set_source_rgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


class View(ABC):
    """Base class for everything that can appear in a view tree."""

    @property
    def children(self) -> List["View"]:
        return []

    def draw(
        self, ctx: cairo.Context, geometry: "LayoutGeometry", style: "GridConfig"
    ):
        """Paint this view into its frame. Containers paint nothing themselves."""
        pass


@dataclass
class Spacer(View):
    """Leaf that occupies its frame without painting."""


@dataclass
class Rectangle(View):
    """Filled rectangle covering the whole frame."""

    color: Optional[str | Color] = None

    def __post_init__(self):
        if self.color is not None:
            self.color = parse_color(self.color)

    def draw(self, ctx, geometry, style):
        set_color(ctx, self.color or style.cell_color)
        ctx.rectangle(geometry.x, geometry.y, geometry.width, geometry.height)
        ctx.fill()


@dataclass
class Text(View):
    """Single line of text, ellipsized to the frame width."""

    text: str
    color: Optional[str | Color] = None
    font_size: Optional[int] = None
    padding: int = 4

    def __post_init__(self):
        if self.color is not None:
            self.color = parse_color(self.color)

    def draw(self, ctx, geometry, style):
        font_size = self.font_size or style.font_size
        ctx.select_font_face(
            style.font_family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL
        )
        ctx.set_font_size(font_size)
        set_color(ctx, self.color or style.text_color)

        max_width = geometry.width - 2 * self.padding
        if max_width <= 0:
            return

        display_text = fit_text(ctx, self.text, max_width)
        y_offset = geometry.y + (geometry.height + font_size) // 2 - 2
        ctx.move_to(geometry.x + self.padding, y_offset)
        ctx.show_text(display_text)


def fit_text(ctx: cairo.Context, text: str, max_width: float) -> str:
    """Truncate text with an ellipsis so it fits in max_width."""
    if ctx.text_extents(text).width <= max_width:
        return text

    ellipsis = "..."
    available = max_width - ctx.text_extents(ellipsis).width

    # Binary search for the longest prefix that fits
    left = 0
    right = len(text)
    while left < right:
        mid = (left + right + 1) // 2
        if ctx.text_extents(text[:mid]).width <= available:
            left = mid
        else:
            right = mid - 1

    return text[:left] + ellipsis


@dataclass
class Identified(View):
    """Wraps the view rendered for one item together with its identity key."""

    id: Hashable
    content: View

    @property
    def children(self) -> List[View]:
        return [self.content]


@dataclass
class HStack(View):
    """
    Children laid out left to right.

    `slots` is the number of equal-width columns the stack divides its width
    into; it defaults to the number of children.
    """

    items: List[View] = field(default_factory=list)
    spacing: float = 0
    slots: Optional[int] = None

    @property
    def children(self) -> List[View]:
        return self.items

    @property
    def slot_count(self) -> int:
        return max(self.slots or len(self.items), 1)


@dataclass
class VStack(View):
    """Children laid out top to bottom in equal-height bands."""

    items: List[View] = field(default_factory=list)
    spacing: float = 0

    @property
    def children(self) -> List[View]:
        return self.items


def walk(view: View) -> Iterator[View]:
    """Yield every node of a view tree, depth-first, in order."""
    yield view
    for child in view.children:
        yield from walk(child)


def ensure_view(value: Any) -> View:
    """Raise TypeError unless value is a View."""
    if not isinstance(value, View):
        raise TypeError(
            f"render callback must return a View, got {type(value).__name__}"
        )
    return value
