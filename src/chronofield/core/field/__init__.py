"""Field functionality: value ranges, field kinds, rules and units."""

from chronofield.core.field.models import FieldKind, FieldRule, ValueRange
from chronofield.core.field.units import ChronoUnit

__all__ = [
    "ChronoUnit",
    "FieldKind",
    "FieldRule",
    "ValueRange",
]
