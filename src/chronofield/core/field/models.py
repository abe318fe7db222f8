"""Field models: value ranges, field kinds and field rules.

A FieldRule is a named, typed descriptor of one calendar field scoped to
exactly one chronology. The arithmetic behind each rule lives on the owning
chronology and is selected by FieldKind, so every chronology implements the
same closed set of variants.

Usage:
    rule = COPTIC.rule(FieldKind.DAY_OF_MONTH)
    rule.extract_from_other(COPTIC.rule(FieldKind.DAY_OF_YEAR), 40)  # 10
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from chronofield.core.errors import ChronologyMismatchError, OutOfRangeError

if TYPE_CHECKING:
    from chronofield.chrono.base import Chronology
    from chronofield.core.field.units import ChronoUnit
    from chronofield.core.types import EpochDay, NanoOfDay


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Closed interval of valid field values.

    Variable-length fields carry a distinct smallest maximum, e.g. the ISO
    day-of-month is 1 - 28/31.
    """

    minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        if not self.minimum <= self.smallest_maximum <= self.maximum:
            raise ValueError(
                f"ValueRange requires minimum <= smallest_maximum <= maximum, got "
                f"{self.minimum}, {self.smallest_maximum}, {self.maximum}"
            )

    @classmethod
    def of(cls, minimum: int, *maxima: int) -> ValueRange:
        """Create a fixed range of(min, max) or a variable one of(min, smallest_max, max)."""
        if len(maxima) == 1:
            return cls(minimum, maxima[0], maxima[0])
        if len(maxima) == 2:
            return cls(minimum, maxima[0], maxima[1])
        raise TypeError(f"ValueRange.of() takes 2 or 3 values, got {1 + len(maxima)}")

    def is_fixed(self) -> bool:
        """Check if the maximum never varies."""
        return self.smallest_maximum == self.maximum

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_value(self, value: int, rule_name: str) -> int:
        """Validate a value against this range.

        Args:
            value: Candidate value.
            rule_name: Field name used in the error message.

        Returns:
            The value unchanged.

        Raises:
            OutOfRangeError: If value is outside the range.
        """
        if not self.contains(value):
            raise OutOfRangeError(rule_name, value, self)
        return value

    def __str__(self) -> str:
        if self.is_fixed():
            return f"{self.minimum} - {self.maximum}"
        return f"{self.minimum} - {self.smallest_maximum}/{self.maximum}"


class FieldKind(Enum):
    """Closed set of field variants every chronology implements.

    Values are the dense ordinals used for a chronology's rule table.
    """

    DAY_OF_MONTH = 0
    DAY_OF_YEAR = 1
    MONTH_OF_YEAR = 2
    YEAR_OF_ERA = 3
    YEAR = 4
    ERA = 5
    HOUR_OF_DAY = 6
    MINUTE_OF_HOUR = 7
    SECOND_OF_MINUTE = 8
    NANO_OF_SECOND = 9
    SECOND_OF_DAY = 10
    NANO_OF_DAY = 11

    @property
    def is_date(self) -> bool:
        return self.value <= FieldKind.ERA.value

    @property
    def is_time(self) -> bool:
        return not self.is_date

    @property
    def label(self) -> str:
        """CamelCase label used to build rule names, e.g. DayOfMonth."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class FieldRule:
    """Descriptor of one calendar field in one chronology.

    Rules are created once per chronology at import time and never mutated.
    Identity across a serialize boundary is (chronology id, ordinal).
    """

    name: str
    kind: FieldKind
    period_unit: ChronoUnit
    period_range: ChronoUnit | None
    range: ValueRange
    ordinal: int
    chronology: Chronology
    base_rule: FieldRule | None = None

    # Arithmetic, delegated to the owning chronology

    def extract_from_epoch(self, epoch_day: EpochDay, nano_of_day: NanoOfDay) -> int | None:
        """Compute this field from the chronology-neutral epoch representation.

        Returns:
            Field value, or None if the field cannot be derived from the epoch.
        """
        return self.chronology.extract_from_epoch(self, epoch_day, nano_of_day)

    def extract_from_other(self, other_rule: FieldRule, other_value: int) -> int | None:
        """Derive this field directly from another field's raw value.

        Returns:
            Field value, or None if no direct relation is known. Callers fall
            back to going through the epoch.
        """
        if other_rule.chronology is not self.chronology:
            return None
        return self.chronology.extract_from_other(self, other_rule, other_value)

    def set_into(self, new_value: int, base_rule: FieldRule, base_value: int) -> int | None:
        """Compute the new base value with this field replaced.

        The result is not validated and may be out of the base rule's
        normal range, e.g. day 31 of a 30-day Coptic month.

        Returns:
            New base value, or None if the relation is undefined.
        """
        if base_rule.chronology is not self.chronology:
            return None
        return self.chronology.set_into(self, new_value, base_rule, base_value)

    def convert_to_period(self, value: int) -> int:
        """Convert a 1-based human value to a 0-based count where needed."""
        if self.ordinal <= self.chronology.one_based_threshold.value:
            return value - 1
        return value

    def convert_from_period(self, period: int) -> int:
        if self.ordinal <= self.chronology.one_based_threshold.value:
            return period + 1
        return period

    # Validation

    def check_value(self, value: int) -> int:
        """Validate value against the static range.

        Raises:
            OutOfRangeError: If value is outside the range.
        """
        return self.range.check_value(value, self.name)

    def is_valid_value(self, value: int) -> bool:
        return self.range.contains(value)

    def get_value_range(self, date: Any = None) -> ValueRange:
        """Get the static range, or the actual range for a specific date.

        Args:
            date: Optional ChronoDate or ChronoDateTime of this chronology.

        Returns:
            ValueRange valid for that date, e.g. 1 - 29 for a leap February.
        """
        if date is None:
            return self.range
        if date.chronology is not self.chronology:
            raise ChronologyMismatchError(self.chronology, date.chronology, "get_value_range")
        return self.chronology.actual_range(self, date)

    # Capabilities

    def set_value(self, date_time: Any, new_value: int) -> Any:
        """Field-setter capability: return date_time with this field replaced."""
        return date_time.with_field(self, new_value)

    @property
    def is_date_based(self) -> bool:
        return self.kind.is_date

    @property
    def is_time_based(self) -> bool:
        return self.kind.is_time

    # Identity

    def to_ref(self) -> dict[str, Any]:
        """Durable reference: chronology name plus ordinal."""
        return {"chronology": self.chronology.name, "ordinal": self.ordinal}

    @classmethod
    def from_ref(cls, data: dict[str, Any]) -> FieldRule:
        """Resolve a reference produced by to_ref() to the canonical singleton."""
        from chronofield.chrono.registry import get_chronology

        return get_chronology(data["chronology"]).rule_for_ordinal(data["ordinal"])

    def __reduce__(self) -> tuple[Any, ...]:
        # Late import to avoid circular dependency
        from chronofield.chrono.registry import restore_rule

        return (restore_rule, (self.chronology.id.value, self.ordinal))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldRule):
            return NotImplemented
        return self.chronology.id == other.chronology.id and self.ordinal == other.ordinal

    def __hash__(self) -> int:
        return hash((self.chronology.id, self.ordinal))

    def __lt__(self, other: FieldRule) -> bool:
        if not isinstance(other, FieldRule):
            return NotImplemented
        if self.chronology.id != other.chronology.id:
            raise ChronologyMismatchError(self.chronology, other.chronology, "rule ordering")
        return self.ordinal < other.ordinal

    def __repr__(self) -> str:
        return f"FieldRule({self.name})"

    def __str__(self) -> str:
        return self.name
