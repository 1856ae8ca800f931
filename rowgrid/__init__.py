"""
rowgrid

Arranges identifiable items into a fixed-column grid, row by row.

This package provides:
- Row partitioning of an ordered sequence into fixed-width rows
- A Collection component that builds a stacked view tree from the rows
- A stack layout engine that computes cell frames
- A Cairo renderer for the resulting view tree

Example usage:
    from rowgrid import make_grid, Text, CairoRenderer

    grid = make_grid(items, columns=3, render=lambda item: Text(item.name))
    CairoRenderer().render_to_png(grid, "grid.png", 600, 400)

Or render a demo grid directly:
    python -m rowgrid --items 5 --columns 2
"""

__version__ = "0.1.0"

from .primitives import Area, CellEdges

from .partition import Grid, Row, partition, iter_rows, row_count, validate_columns

from .config import GridConfig, DEFAULT_CONFIG, parse_color

from .views import (
    View,
    Text,
    Rectangle,
    Spacer,
    Identified,
    HStack,
    VStack,
    walk,
)

from .layout import LayoutGeometry, arrange, cell_frames

from .collection import Collection, make_grid, identity_of

from .renderer import GridRenderer, CairoRenderer

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Area",
    "CellEdges",
    # Partitioning
    "Grid",
    "Row",
    "partition",
    "iter_rows",
    "row_count",
    "validate_columns",
    # Configuration
    "GridConfig",
    "DEFAULT_CONFIG",
    "parse_color",
    # Views
    "View",
    "Text",
    "Rectangle",
    "Spacer",
    "Identified",
    "HStack",
    "VStack",
    "walk",
    # Layout
    "LayoutGeometry",
    "arrange",
    "cell_frames",
    # Collection
    "Collection",
    "make_grid",
    "identity_of",
    # Rendering
    "GridRenderer",
    "CairoRenderer",
    # Event topics
    "topics",
]
