"""
Grid Rendering with Cairo

Provides the GridRenderer interface and CairoRenderer, which paints a
collection's view tree onto a Cairo context.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, TYPE_CHECKING
import cairo
from pubsub import pub

from . import topics
from .config import DEFAULT_CONFIG, GridConfig
from .layout import arrange
from .primitives import Area
from .views import Identified, set_color

if TYPE_CHECKING:
    from .collection import Collection


class GridRenderer(ABC):
    """Turns a collection into output on some target."""

    @abstractmethod
    def render(self, collection: "Collection", target: Any, area: Area):
        """
        Render a collection.

        Args:
            collection: Collection to render
            target: Renderer-specific drawing target
            area: Region of the target to fill
        """
        pass


class CairoRenderer(GridRenderer):
    """Paints a collection onto a Cairo context.

    Each item cell is painted with the views its render callback returned;
    the background fills the whole area first.
    """

    def __init__(self, style: Optional[GridConfig] = None):
        """Initialize the renderer.

        Args:
            style: Colors and fonts, defaults to the shared configuration
        """
        self.style = style or DEFAULT_CONFIG

    def render(self, collection: "Collection", target: cairo.Context, area: Area):
        tree = collection.body()
        row_count = len(tree.items)
        item_count = len(collection)

        pub.sendMessage(
            topics.RENDER_STARTED, row_count=row_count, item_count=item_count
        )

        ctx = target
        try:
            ctx.save()
            try:
                set_color(ctx, self.style.background_color)
                ctx.rectangle(area.x, area.y, area.width, area.height)
                ctx.fill()

                cells = []
                for view, geometry in arrange(tree, area):
                    view.draw(ctx, geometry, self.style)
                    if isinstance(view, Identified):
                        cells.append((view.id, geometry))
            finally:
                ctx.restore()

            for key, geometry in cells:
                pub.sendMessage(topics.CELL_RENDERED, key=key, geometry=geometry)
        finally:
            # Every RENDER_STARTED is paired, also when a view fails to draw
            pub.sendMessage(
                topics.RENDER_FINISHED, row_count=row_count, item_count=item_count
            )

    def render_surface(
        self, collection: "Collection", width: int, height: int
    ) -> cairo.ImageSurface:
        """Render into a new ARGB32 image surface of the given size."""
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        ctx = cairo.Context(surface)
        try:
            self.render(collection, ctx, Area(0, 0, width, height))
        except Exception:
            surface.finish()
            raise
        surface.flush()
        return surface

    def render_to_png(self, collection: "Collection", path, width: int, height: int):
        """Render a collection and write it to a PNG file."""
        surface = self.render_surface(collection, width, height)
        try:
            surface.write_to_png(str(path))
        finally:
            surface.finish()
