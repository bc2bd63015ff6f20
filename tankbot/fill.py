"""Filling rectangular regions of a grid."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def fill_grid(
    grid: MutableSequence[MutableSequence[T]],
    start_x: int,
    start_y: int,
    end_x: int,
    end_y: int,
    value: T,
) -> None:
    """Set every cell with start_x <= row <= end_x and start_y <= col <= end_y to value."""
    if end_x < start_x or end_y < start_y:
        raise ValueError("Invalid range for filling!")
    width = end_y - start_y + 1
    for row in grid[start_x : end_x + 1]:
        row[start_y : end_y + 1] = [value] * width