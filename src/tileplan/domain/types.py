"""Selector enums for units, room shapes, and layout patterns."""

from __future__ import annotations

from enum import StrEnum


class Unit(StrEnum):
    """Supported length units. Millimeters are canonical."""

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    INCH = "in"
    FOOT = "ft"


class RoomShape(StrEnum):
    """Room outline selectors."""

    RECTANGLE = "rectangle"
    SQUARE = "square"
    L_SHAPE = "l-shape"
    CUSTOM = "custom"


class Pattern(StrEnum):
    """Tile arrangement selectors. Pure selectors, no payload."""

    GRID = "grid"
    BRICK = "brick"
    HERRINGBONE = "herringbone"


class CuttingComplexity(StrEnum):
    """How much cutting a layout needs, graded by its cut-tile ratio."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
