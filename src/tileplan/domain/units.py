"""Length unit conversion to and from canonical millimeters.

Fixed linear factors, no rounding. Rounding is a presentation concern
handled by :func:`format_with_unit` and the output layer.
"""

from __future__ import annotations

from tileplan.domain.types import Unit

MM_PER_UNIT: dict[Unit, float] = {
    Unit.MILLIMETER: 1.0,
    Unit.CENTIMETER: 10.0,
    Unit.METER: 1000.0,
    Unit.INCH: 25.4,
    Unit.FOOT: 304.8,
}

CANONICAL_UNIT = Unit.MILLIMETER

_DISPLAY_NAMES: dict[Unit, tuple[str, str]] = {
    Unit.MILLIMETER: ("millimeter", "millimeters"),
    Unit.CENTIMETER: ("centimeter", "centimeters"),
    Unit.METER: ("meter", "meters"),
    Unit.INCH: ("inch", "inches"),
    Unit.FOOT: ("foot", "feet"),
}

_PRECISION: dict[Unit, int] = {
    Unit.MILLIMETER: 0,
    Unit.CENTIMETER: 1,
    Unit.METER: 2,
    Unit.INCH: 2,
    Unit.FOOT: 2,
}

_METRIC = frozenset({Unit.MILLIMETER, Unit.CENTIMETER, Unit.METER})


class InvalidUnitError(ValueError):
    """Unit tag outside the supported enumeration."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        allowed = ", ".join(u.value for u in Unit)
        super().__init__(f"Unsupported unit {unit!r} (expected one of: {allowed})")


def coerce_unit(unit: Unit | str) -> Unit:
    """Return *unit* as a :class:`Unit`, raising InvalidUnitError otherwise."""
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(unit)
    except ValueError as exc:
        raise InvalidUnitError(unit) from exc


def to_canonical(value: float, unit: Unit | str) -> float:
    """Convert *value* expressed in *unit* to millimeters."""
    return value * MM_PER_UNIT[coerce_unit(unit)]


def from_canonical(value: float, unit: Unit | str) -> float:
    """Convert millimeters to *unit*. Exact inverse of :func:`to_canonical`."""
    return value / MM_PER_UNIT[coerce_unit(unit)]


def convert_length(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """Convert a length between any two supported units."""
    source = coerce_unit(from_unit)
    target = coerce_unit(to_unit)
    if source is target:
        return value
    return from_canonical(to_canonical(value, source), target)


def convert_area(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """Convert an area between squared units (``m`` means m², etc.)."""
    source = coerce_unit(from_unit)
    target = coerce_unit(to_unit)
    if source is target:
        return value
    factor = MM_PER_UNIT[source] / MM_PER_UNIT[target]
    return value * factor * factor


def area_to_square_meters(value_mm2: float) -> float:
    """Canonical mm² to m²."""
    return convert_area(value_mm2, Unit.MILLIMETER, Unit.METER)


def unit_display_name(unit: Unit | str, *, plural: bool = False) -> str:
    singular, many = _DISPLAY_NAMES[coerce_unit(unit)]
    return many if plural else singular


def unit_precision(unit: Unit | str) -> int:
    """Suggested number of decimals when displaying a value in *unit*."""
    return _PRECISION[coerce_unit(unit)]


def is_metric(unit: Unit | str) -> bool:
    return coerce_unit(unit) in _METRIC


def is_imperial(unit: Unit | str) -> bool:
    return not is_metric(unit)


def format_with_unit(value: float, unit: Unit | str, decimals: int | None = None) -> str:
    """Format *value* with its unit suffix, dropping trailing zeros.

    Examples:
        >>> format_with_unit(2.50, "m")
        '2.5 m'
        >>> format_with_unit(300, "mm")
        '300 mm'
    """
    resolved = coerce_unit(unit)
    places = unit_precision(resolved) if decimals is None else decimals
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {resolved.value}"
