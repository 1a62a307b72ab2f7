"""Mass unit normalization to pounds."""

import logging
from enum import Enum

LBS_PER_KG = 2.20462

_logger = logging.getLogger(__name__)


class MassUnit(Enum):
    """Supported mass units."""

    POUNDS = "lbs"
    KILOGRAMS = "kg"


_UNIT_ALIASES = {
    "lb": MassUnit.POUNDS,
    "lbs": MassUnit.POUNDS,
    "pound": MassUnit.POUNDS,
    "pounds": MassUnit.POUNDS,
    "kg": MassUnit.KILOGRAMS,
    "kgs": MassUnit.KILOGRAMS,
    "kilogram": MassUnit.KILOGRAMS,
    "kilograms": MassUnit.KILOGRAMS,
}


def resolve_unit(tag: str | None) -> MassUnit:
    """Resolve a stored unit tag, assuming pounds when it is unknown."""
    if tag is not None:
        unit = _UNIT_ALIASES.get(str(tag).strip().lower())
        if unit is not None:
            return unit
    _logger.warning("Unrecognized weight unit %r, assuming pounds", tag)
    return MassUnit.POUNDS


def to_pounds(value: float, tag: str | MassUnit | None) -> float:
    """Express a mass value in pounds."""
    unit = tag if isinstance(tag, MassUnit) else resolve_unit(tag)
    if unit is MassUnit.KILOGRAMS:
        return value * LBS_PER_KG
    return value


def from_pounds(value: float, unit: MassUnit) -> float:
    """Convert a value in pounds to the requested unit."""
    if unit is MassUnit.KILOGRAMS:
        return value / LBS_PER_KG
    return value
