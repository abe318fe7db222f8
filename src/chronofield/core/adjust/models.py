"""Adjuster protocols: capability-based mutation of date-time values.

A caller hands an adjuster to a date-time; the date-time passes itself in
and receives a candidate replacement. The candidate is only accepted if it
belongs to the same chronology as the target.

Usage:
    class NextMidday:
        def adjust_with(self, dt):
            return dt.plus_days(1).with_time(LocalTime.MIDDAY)

    dt.with_adjuster(NextMidday())
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ChronologyBound(Protocol):
    """Any value that belongs to a chronology."""

    @property
    def chronology(self) -> Any: ...


@runtime_checkable
class WithAdjuster(Protocol):
    """Maps the current value to a full replacement value."""

    def adjust_with(self, date_time: Any) -> Any: ...


@runtime_checkable
class PlusAdjuster(Protocol):
    """Maps the current value to a value with an amount added."""

    def adjust_plus(self, date_time: Any) -> Any: ...


@runtime_checkable
class MinusAdjuster(Protocol):
    """Maps the current value to a value with an amount subtracted."""

    def adjust_minus(self, date_time: Any) -> Any: ...


@runtime_checkable
class DateTimeField(Protocol):
    """Field-valued setter: maps the current value and a new field value to a replacement."""

    @property
    def name(self) -> str: ...

    def set_value(self, date_time: Any, new_value: int) -> Any: ...


@runtime_checkable
class TemporalUnit(Protocol):
    """Unit that knows how to add an amount of itself to a value."""

    def add_to(self, date_time: Any, amount: int) -> Any: ...
