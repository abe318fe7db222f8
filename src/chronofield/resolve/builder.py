"""ResolutionBuilder: merge (rule, value) pairs into one date-time.

Usage:
    builder = ResolutionBuilder(COPTIC)
    builder.add_field_value(COPTIC.rule(FieldKind.DAY_OF_YEAR), 40)
    builder.add_field_value(COPTIC.rule(FieldKind.YEAR), 3)
    builder.resolve_date()  # Coptic AM 3-02-10
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

from chronofield.core.errors import ChronologyMismatchError, IncompleteResolutionError, ResolutionConflictError
from chronofield.resolve.models import ResolverConfig, Strictness
from chronofield.resolve.operations import (
    assemble_date,
    assemble_time,
    cross_check,
    derive_values,
    has_date_fields,
)

if TYPE_CHECKING:
    from chronofield.chrono.base import Chronology
    from chronofield.core.field import FieldRule
    from chronofield.temporal.chrono_date import ChronoDate
    from chronofield.temporal.chrono_date_time import ChronoDateTime
    from chronofield.temporal.local_time import LocalTime

logger = logging.getLogger(__name__)


class ResolutionBuilder:
    """Accumulates field values for one chronology and resolves them.

    Values are validated as they are added. Resolution never mutates the
    builder, so resolve() can be called repeatedly, e.g. with different
    strictness. A builder must not be shared between concurrent writers.

    Args:
        chronology: Chronology to resolve into. Defaults to the configured one.
        config: Resolver configuration. Defaults to ResolverConfig.from_settings().
    """

    def __init__(self, chronology: Chronology | None = None, config: ResolverConfig | None = None) -> None:
        self._config = config if config is not None else ResolverConfig.from_settings()
        if chronology is None:
            from chronofield.chrono.registry import get_chronology

            chronology = get_chronology(self._config.chronology)
        self._chronology = chronology
        self._values: dict[FieldRule, int] = {}
        self._duplicates: list[tuple[FieldRule, int, int]] = []

    @property
    def chronology(self) -> Chronology:
        return self._chronology

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def add_field_value(self, rule: FieldRule, value: int) -> ResolutionBuilder:
        """Add a field value.

        Re-adding a rule with a different value keeps the last value and
        records the duplicate, which strict resolution reports as a conflict.

        Returns:
            self, for chaining.

        Raises:
            ChronologyMismatchError: If the rule belongs to another chronology.
            OutOfRangeError: If the value is outside the rule's range.
        """
        if rule.chronology != self._chronology:
            raise ChronologyMismatchError(self._chronology, rule.chronology, "add_field_value")
        rule.check_value(value)
        previous = self._values.get(rule)
        if previous is not None and previous != value:
            warnings.warn(
                f"{rule.name} added twice with different values: {previous} then {value}",
                stacklevel=2,
            )
            self._duplicates.append((rule, previous, value))
        self._values[rule] = value
        return self

    def known_values(self) -> dict[FieldRule, int]:
        """Copy of the supplied values, in insertion order."""
        return dict(self._values)

    def _prepare(self, strictness: Strictness | None) -> tuple[Strictness, dict[FieldRule, int]]:
        strictness = strictness if strictness is not None else self._config.strictness
        if strictness is Strictness.STRICT and self._duplicates:
            rule, first, second = self._duplicates[0]
            raise ResolutionConflictError(rule.name, first, second, "a second add_field_value")
        known = derive_values(self._chronology, self._values, strictness)
        logger.debug(
            "Resolving %d supplied and %d derived %s values (%s)",
            len(self._values),
            len(known) - len(self._values),
            self._chronology.name,
            strictness.value,
        )
        return strictness, known

    def resolve(self, strictness: Strictness | None = None) -> ChronoDateTime:
        """Resolve into a date-time; the time defaults to midnight.

        Args:
            strictness: Overrides the configured strictness for this call.

        Raises:
            IncompleteResolutionError: If the date cannot be determined.
            ResolutionConflictError: In strict mode, if values disagree.
            OutOfRangeError: In strict mode, if a day does not exist.
        """
        strictness, known = self._prepare(strictness)
        date = assemble_date(self._chronology, known, strictness)
        time = assemble_time(self._chronology, known)
        cross_check(date, time, known, strictness)
        return date.at_time(time)

    def resolve_date(self, strictness: Strictness | None = None) -> ChronoDate:
        return self.resolve(strictness).date

    def resolve_time(self, strictness: Strictness | None = None) -> LocalTime:
        """Resolve only the time of day; date fields, if any, are also checked."""
        strictness, known = self._prepare(strictness)
        time = assemble_time(self._chronology, known)
        if has_date_fields(self._chronology, known):
            try:
                date = assemble_date(self._chronology, known, strictness)
            except IncompleteResolutionError:
                date = None
        else:
            date = None
        cross_check(date, time, known, strictness)
        return time

    def __repr__(self) -> str:
        values = ", ".join(f"{rule.name}={value}" for rule, value in self._values.items())
        return f"ResolutionBuilder({self._chronology.name}: {values})"
