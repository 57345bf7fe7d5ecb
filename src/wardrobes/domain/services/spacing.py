"""Spacing laws for laying out doors, columns and shelves.

Doors and columns are distributed across the width; shelves across the
height. The door and column formulas look alike but are not the same:
doors have a physical width that takes part in the distribution, while
columns have none and are spread by a derived section width instead.

All values are meters.
"""

from __future__ import annotations

from ..value_objects import COLUMN_MIN_SPACING, DOOR_MIN_SPACING, SHELF_MIN_SPACING


def door_gap(
    width: float,
    door_thickness: float,
    door_width: float,
    count: int,
    min_spacing: float = DOOR_MIN_SPACING,
) -> float:
    """Gap between neighbouring doors (and the frame) for ``count`` doors."""
    available = (width - door_thickness) - door_thickness
    return max(min_spacing, (available - count * door_width) / (count + 1))


def door_offsets(
    width: float,
    door_thickness: float,
    door_width: float,
    count: int,
    min_spacing: float = DOOR_MIN_SPACING,
) -> list[float]:
    """Left offsets of ``count`` evenly spaced doors.

    Args:
        width: Outer wardrobe width.
        door_thickness: Door panel thickness; also the inner bound on each side.
        door_width: Width shared by every door.
        count: Total number of doors after the operation.
        min_spacing: Lower bound for the gap between doors.

    Returns:
        Offsets ordered left to right. Empty when ``count`` is 0.
    """
    if count <= 0:
        return []
    gap = door_gap(width, door_thickness, door_width, count, min_spacing)
    x0 = door_thickness
    return [x0 + gap * (i + 1) + door_width * i for i in range(count)]


def column_section_width(
    width: float,
    frame_thickness: float,
    count: int,
    min_spacing: float = COLUMN_MIN_SPACING,
) -> float:
    """Width of each section between columns for ``count`` columns."""
    available = width - 2 * frame_thickness
    total_spacing = min_spacing * (count + 1)
    return (available - total_spacing) / count


def column_offsets(
    width: float,
    frame_thickness: float,
    count: int,
    min_spacing: float = COLUMN_MIN_SPACING,
) -> list[float]:
    """Offsets of ``count`` columns.

    Args:
        width: Outer wardrobe width.
        frame_thickness: Frame panel thickness; the left inner bound.
        count: Total number of columns after the operation.
        min_spacing: Fixed spacing added before each column.

    Returns:
        Offsets ordered left to right. Empty when ``count`` is 0.
    """
    if count <= 0:
        return []
    section_width = column_section_width(width, frame_thickness, count, min_spacing)
    return [
        frame_thickness + min_spacing * (i + 1) + section_width * i
        for i in range(count)
    ]


def shelf_bounds(
    height: float,
    frame_thickness: float,
    shelf_thickness: float,
    min_spacing: float = SHELF_MIN_SPACING,
) -> tuple[float, float]:
    """Lowest and highest allowed shelf center lines."""
    half = shelf_thickness / 2
    start = frame_thickness + half + min_spacing
    end = height - frame_thickness - half - min_spacing
    return start, end


def shelf_offsets(
    height: float,
    frame_thickness: float,
    shelf_thickness: float,
    total: int,
    first_index: int = 0,
    min_spacing: float = SHELF_MIN_SPACING,
) -> list[float]:
    """Center lines for shelves ``first_index .. total - 1``.

    The step is computed from the final ``total`` so that newly appended
    shelves sit where an even distribution of ``total`` shelves would put
    them. Shelves below ``first_index`` are not recomputed.
    """
    if total <= first_index:
        return []
    start, end = shelf_bounds(height, frame_thickness, shelf_thickness, min_spacing)
    step = (end - start) / (total + 1)
    return [start + step * (i + 1) for i in range(first_index, total)]
