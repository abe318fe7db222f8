"""Error hierarchy for field computation, chronologies and resolution.

All errors are local, synchronous and value-level. Nothing in the package
retries; callers decide what to do with a failure.
"""

from __future__ import annotations


class CalendricalError(Exception):
    """Base class for every error raised by chronofield."""

    pass


class OutOfRangeError(CalendricalError, ValueError):
    """Raised when a field value falls outside its rule's ValueRange."""

    def __init__(self, rule_name: str, value: int, valid: object) -> None:
        super().__init__(f"Invalid value for {rule_name} (valid values {valid}): {value}")
        self.rule_name = rule_name
        self.value = value


class UnsupportedFieldError(CalendricalError):
    """Raised when a rule is queried against a value that does not define it."""

    pass


class ChronologyMismatchError(CalendricalError):
    """Raised when a value of one chronology is offered to another."""

    def __init__(self, expected: object, actual: object, operation: str = "") -> None:
        where = f" in {operation}" if operation else ""
        super().__init__(f"Chronology mismatch{where}: required {expected}, supplied {actual}")
        self.expected = expected
        self.actual = actual


class ResolutionError(CalendricalError):
    """Base class for failures of ResolutionBuilder.resolve()."""

    pass


class ResolutionConflictError(ResolutionError):
    """Raised in strict mode when two values for the same field disagree."""

    def __init__(self, rule_name: str, first: int, second: int, source: str = "") -> None:
        origin = f" (derived from {source})" if source else ""
        super().__init__(f"Conflict found: {rule_name} {first} differs from {rule_name} {second}{origin}")
        self.rule_name = rule_name
        self.first = first
        self.second = second


class IncompleteResolutionError(ResolutionError):
    """Raised when the known fields cannot produce the requested shape."""

    pass


class ArithmeticOverflowError(CalendricalError, OverflowError):
    """Raised when an intermediate result leaves the signed 64-bit range."""

    pass
