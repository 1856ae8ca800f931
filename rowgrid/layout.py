"""
Stack Layout

Computes integer frames for every node of a view tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Hashable, List, Tuple

from .primitives import ALL_EDGES, Area, CellEdges
from .views import HStack, Identified, View, VStack


@dataclass
class LayoutGeometry:
    """Calculated geometry for a view in a layout."""

    x: int
    y: int
    width: int
    height: int
    edges: CellEdges = CellEdges.NONE


def arrange(view: View, area: Area) -> List[Tuple[View, LayoutGeometry]]:
    """
    Calculate frames for a view tree.

    VStack children get equal-height bands. HStack children get cells of
    `width // slots`, so a short last row keeps the column width of the full
    rows instead of stretching. Stack spacing is not applied to frames.

    Args:
        view: Root of the view tree
        area: Available area for the tree

    Returns:
        (view, geometry) pairs in depth-first order, root first
    """
    result: List[Tuple[View, LayoutGeometry]] = []
    root = LayoutGeometry(area.x, area.y, area.width, area.height, ALL_EDGES)
    _arrange(view, root, result)
    return result


def _arrange(
    view: View, frame: LayoutGeometry, result: List[Tuple[View, LayoutGeometry]]
):
    result.append((view, frame))

    if isinstance(view, VStack):
        n = len(view.items)
        if n == 0:
            return
        band = frame.height // n
        for i, child in enumerate(view.items):
            edges = frame.edges
            if i != 0:
                edges &= ~CellEdges.TOP
            if i != n - 1:
                edges &= ~CellEdges.BOTTOM
            child_frame = LayoutGeometry(
                frame.x, frame.y + i * band, frame.width, band, edges
            )
            _arrange(child, child_frame, result)

    elif isinstance(view, HStack):
        slots = view.slot_count
        cell = frame.width // slots
        for i, child in enumerate(view.items):
            edges = frame.edges
            if i != 0:
                edges &= ~CellEdges.LEFT
            if i != slots - 1:
                edges &= ~CellEdges.RIGHT
            child_frame = LayoutGeometry(
                frame.x + i * cell, frame.y, cell, frame.height, edges
            )
            _arrange(child, child_frame, result)

    else:
        for child in view.children:
            _arrange(child, frame, result)


def cell_frames(view: View, area: Area) -> Dict[Hashable, LayoutGeometry]:
    """Map each item's identity key to the frame of its cell."""
    return {
        node.id: geometry
        for node, geometry in arrange(view, area)
        if isinstance(node, Identified)
    }
