"""Greedy row packing for tag chips."""
import math
from typing import NamedTuple, Sequence


class Size(NamedTuple):
    width: float
    height: float


class Point(NamedTuple):
    x: float
    y: float


class FlowLayout(NamedTuple):
    size: Size
    positions: list[Point]


def compute_flow_layout(
    sizes: Sequence[tuple[float, float]],
    max_width: float = math.inf,
    spacing: float = 8.0,
) -> FlowLayout:
    """
    Place items left to right, wrapping before an item that would overflow.

    The first item on a line is never wrapped, so an item wider than
    ``max_width`` still gets a line of its own.

    Returns:
        The bounding size and the top-left offset of each item, in input order.
        The bounding width is the widest line, which may exceed ``max_width``
        when a single item is wider than it.
    """
    positions = []
    x = 0.0
    y = 0.0
    row_height = 0.0
    total_height = 0.0
    widest = 0.0

    for width, height in sizes:
        if x + width > max_width and x > 0:
            x = 0.0
            y += row_height + spacing
            row_height = 0.0
        positions.append(Point(x, y))
        row_height = max(row_height, height)
        widest = max(widest, x + width)
        x += width + spacing
        total_height = y + row_height

    return FlowLayout(Size(widest, total_height), positions)
