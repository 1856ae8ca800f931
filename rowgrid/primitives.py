"""
Geometry Primitives

Plain value types shared by the layout engine and the renderers.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntFlag


class CellEdges(IntFlag):
    """Grid boundary flags for a laid-out cell."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8


ALL_EDGES = CellEdges.TOP | CellEdges.BOTTOM | CellEdges.LEFT | CellEdges.RIGHT


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
