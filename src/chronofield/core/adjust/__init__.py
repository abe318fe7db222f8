"""Adjuster protocols and the chronology-safety check."""

from chronofield.core.adjust.models import (
    ChronologyBound,
    DateTimeField,
    MinusAdjuster,
    PlusAdjuster,
    TemporalUnit,
    WithAdjuster,
)
from chronofield.core.adjust.operations import check_same_chronology

__all__ = [
    "ChronologyBound",
    "DateTimeField",
    "MinusAdjuster",
    "PlusAdjuster",
    "TemporalUnit",
    "WithAdjuster",
    "check_same_chronology",
]
