"""chronofield: calendrical fields across interchangeable chronologies.

Named calendar fields computed from an epoch day and nano-of-day, resolved
from partial input, and kept within one calendar system by an explicit
chronology-safety check.

Usage:
    from chronofield import COPTIC, ISO, FieldKind, ResolutionBuilder

    date = ISO.date(1970, 1, 1).with_chronology(COPTIC)
    date.get(COPTIC.rule(FieldKind.MONTH_OF_YEAR))  # 4

    builder = ResolutionBuilder(COPTIC)
    builder.add_field_value(COPTIC.rule(FieldKind.DAY_OF_YEAR), 40)
    builder.add_field_value(COPTIC.rule(FieldKind.YEAR), 3)
    builder.resolve()  # Coptic AM 3-02-10T00:00
"""

from chronofield.chrono import (
    COPTIC,
    HIJRAH,
    ISO,
    JAPANESE,
    MINGUO,
    THAI_BUDDHIST,
    Chronology,
    ChronologyId,
    all_chronologies,
    get_chronology,
)
from chronofield.core import (
    ArithmeticOverflowError,
    CalendricalError,
    ChronologyMismatchError,
    ChronoUnit,
    FieldKind,
    FieldRule,
    IncompleteResolutionError,
    OutOfRangeError,
    ResolutionConflictError,
    ResolutionError,
    UnsupportedFieldError,
    ValueRange,
    check_same_chronology,
)
from chronofield.resolve import ResolutionBuilder, ResolverConfig, Strictness
from chronofield.temporal import ChronoDate, ChronoDateTime, LocalTime, Overflow, Period

__version__ = "0.1.0"

__all__ = [
    # Chronologies
    "COPTIC",
    "HIJRAH",
    "ISO",
    "JAPANESE",
    "MINGUO",
    "THAI_BUDDHIST",
    "Chronology",
    "ChronologyId",
    "all_chronologies",
    "get_chronology",
    # Fields
    "ChronoUnit",
    "FieldKind",
    "FieldRule",
    "ValueRange",
    "check_same_chronology",
    # Values
    "ChronoDate",
    "ChronoDateTime",
    "LocalTime",
    "Overflow",
    "Period",
    # Resolution
    "ResolutionBuilder",
    "ResolverConfig",
    "Strictness",
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
