"""
Demo Grid

Renders a grid of numbered tiles to a PNG file.
"""

from __future__ import annotations
import argparse
import os
import time
from dataclasses import dataclass
from typing import List, Optional

from pubsub import pub

from .collection import make_grid
from .config import GridConfig
from .renderer import CairoRenderer
from .views import HStack, Rectangle, Text


@dataclass(frozen=True)
class Tile:
    """Demo item."""

    id: int
    title: str


def render_tile(tile: Tile):
    return HStack([Rectangle(), Text(tile.title)], slots=2)


def debug_event_logger(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    timestamp = time.strftime("%H:%M:%S")
    topic_name = topic.getName()
    data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
    print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rowgrid", description="Render a demo grid to a PNG file."
    )
    parser.add_argument("--items", type=int, default=5, help="number of tiles")
    parser.add_argument("--columns", type=int, default=2, help="tiles per row")
    parser.add_argument("--width", type=positive_int, default=400)
    parser.add_argument("--height", type=positive_int, default=300)
    parser.add_argument("--margin", type=int, default=None, help="small margin")
    parser.add_argument("--output", default="rowgrid.png", help="PNG path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if os.getenv("ROWGRID_DEBUG"):
        pub.subscribe(debug_event_logger, pub.ALL_TOPICS)

    try:
        config = GridConfig() if args.margin is None else GridConfig(args.margin)
        tiles = [Tile(id=i, title=f"Tile {i + 1}") for i in range(max(args.items, 0))]
        grid = make_grid(tiles, render_tile, columns=args.columns, config=config)
    except (TypeError, ValueError) as e:
        print(f"Invalid grid configuration: {e}")
        return 1

    CairoRenderer(config).render_to_png(grid, args.output, args.width, args.height)

    print(f"Rendered {len(grid)} items in {grid.row_count} rows to {args.output}")
    return 0
