"""Core functionalities: stateless primitives shared by every chronology.

Architecture Note:
    core/ contains pure, immutable building blocks: ranges, field rules,
    units, adjuster protocols, errors and checked arithmetic. Calendar
    arithmetic lives in chrono/, values in temporal/, merging in resolve/.
"""

from chronofield.core.adjust import (
    DateTimeField,
    MinusAdjuster,
    PlusAdjuster,
    TemporalUnit,
    WithAdjuster,
    check_same_chronology,
)
from chronofield.core.errors import (
    ArithmeticOverflowError,
    CalendricalError,
    ChronologyMismatchError,
    IncompleteResolutionError,
    OutOfRangeError,
    ResolutionConflictError,
    ResolutionError,
    UnsupportedFieldError,
)
from chronofield.core.field import ChronoUnit, FieldKind, FieldRule, ValueRange
from chronofield.core.types import EpochDay, FieldValue, NanoOfDay

__all__ = [
    # Types
    "EpochDay",
    "FieldValue",
    "NanoOfDay",
    # Field
    "ChronoUnit",
    "FieldKind",
    "FieldRule",
    "ValueRange",
    # Adjust
    "DateTimeField",
    "MinusAdjuster",
    "PlusAdjuster",
    "TemporalUnit",
    "WithAdjuster",
    "check_same_chronology",
    # Errors
    "ArithmeticOverflowError",
    "CalendricalError",
    "ChronologyMismatchError",
    "IncompleteResolutionError",
    "OutOfRangeError",
    "ResolutionConflictError",
    "ResolutionError",
    "UnsupportedFieldError",
]
