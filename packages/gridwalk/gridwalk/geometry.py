"""Grid-line geometry and world-to-screen mapping.

World coordinates put the origin at the center of the viewport with y
pointing up. Screen coordinates put it at the top-left with y pointing
down.
"""
from __future__ import annotations

from dataclasses import dataclass

from gridwalk.vec import Vec


@dataclass(frozen=True)
class LineSegment:
    start: Vec
    end: Vec


def grid_lines(
    width: float,
    height: float,
    cells_x: int,
    cells_y: int,
) -> list[LineSegment]:
    """Evenly spaced horizontal and vertical lines plus the center line."""
    if width <= 0 or height <= 0:
        raise ValueError("viewport dimensions must be positive")
    if cells_x <= 0 or cells_y <= 0:
        raise ValueError("cell counts must be positive")

    half_w = 0.5 * width
    half_h = 0.5 * height
    x_space = width / cells_x
    y_space = height / cells_y

    lines: list[LineSegment] = []
    for k in range(cells_y):
        y = -half_h + k * y_space
        lines.append(LineSegment((-half_w, y, 0.0), (half_w, y, 0.0)))
    for k in range(cells_x):
        x = -half_w + k * x_space
        lines.append(LineSegment((x, -half_h, 0.0), (x, half_h, 0.0)))
    lines.append(LineSegment((0.0, -half_h, 0.0), (0.0, half_h, 0.0)))
    return lines


def to_screen(point: Vec, width: float, height: float) -> tuple[float, float]:
    return (point[0] + 0.5 * width, 0.5 * height - point[1])
