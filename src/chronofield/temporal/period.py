"""An amount of calendar and clock time, e.g. 'P1Y2M3DT4H'."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar

from chronofield.core.constants import LONG_MAX, LONG_MIN, NANOS_PER_SECOND
from chronofield.core.errors import ArithmeticOverflowError
from chronofield.core.safe_math import safe_add, safe_multiply, safe_subtract


@dataclass(frozen=True, slots=True)
class Period:
    """Seven independent signed amounts; nothing is normalized.

    A period is both a plus- and a minus-adjuster: dates apply its
    date part, date-times apply all of it.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    nanos: int = 0

    ZERO: ClassVar[Period]

    def __post_init__(self) -> None:
        for f in fields(self):
            amount = getattr(self, f.name)
            if amount < LONG_MIN or amount > LONG_MAX:
                raise ArithmeticOverflowError(f"Period {f.name} does not fit in a long: {amount}")

    # --- Factories ----------------------------------------------------------

    @classmethod
    def of(
        cls,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanos: int = 0,
    ) -> Period:
        """Period of the given amounts; all zero gives Period.ZERO.

        Raises:
            ArithmeticOverflowError: If an amount does not fit in a long.
        """
        if not any((years, months, days, hours, minutes, seconds, nanos)):
            return cls.ZERO
        return cls(years, months, days, hours, minutes, seconds, nanos)

    @classmethod
    def of_date(cls, years: int = 0, months: int = 0, days: int = 0) -> Period:
        return cls.of(years=years, months=months, days=days)

    @classmethod
    def of_time(cls, hours: int = 0, minutes: int = 0, seconds: int = 0, nanos: int = 0) -> Period:
        return cls.of(hours=hours, minutes=minutes, seconds=seconds, nanos=nanos)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls.of(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls.of(months=months)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls.of(days=days)

    @classmethod
    def of_hours(cls, hours: int) -> Period:
        return cls.of(hours=hours)

    @classmethod
    def of_minutes(cls, minutes: int) -> Period:
        return cls.of(minutes=minutes)

    @classmethod
    def of_seconds(cls, seconds: int) -> Period:
        return cls.of(seconds=seconds)

    @classmethod
    def of_nanos(cls, nanos: int) -> Period:
        return cls.of(nanos=nanos)

    # --- Withers ------------------------------------------------------------

    def _with(self, name: str, amount: int) -> Period:
        if getattr(self, name) == amount:
            return self
        return replace(self, **{name: amount})

    def with_years(self, years: int) -> Period:
        return self._with("years", years)

    def with_months(self, months: int) -> Period:
        return self._with("months", months)

    def with_days(self, days: int) -> Period:
        return self._with("days", days)

    def with_hours(self, hours: int) -> Period:
        return self._with("hours", hours)

    def with_minutes(self, minutes: int) -> Period:
        return self._with("minutes", minutes)

    def with_seconds(self, seconds: int) -> Period:
        return self._with("seconds", seconds)

    def with_nanos(self, nanos: int) -> Period:
        return self._with("nanos", nanos)

    def _amounts(self) -> tuple[int, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def is_zero(self) -> bool:
        return not any(self._amounts())

    @property
    def has_time(self) -> bool:
        return any((self.hours, self.minutes, self.seconds, self.nanos))

    def plus(self, other: Period) -> Period:
        """Component-wise sum.

        Raises:
            ArithmeticOverflowError: If any component leaves the long range.
        """
        return Period(*(safe_add(a, b) for a, b in zip(self._amounts(), other._amounts(), strict=True)))

    def minus(self, other: Period) -> Period:
        return Period(*(safe_subtract(a, b) for a, b in zip(self._amounts(), other._amounts(), strict=True)))

    def multiplied_by(self, scalar: int) -> Period:
        if scalar == 1:
            return self
        return Period(*(safe_multiply(a, scalar) for a in self._amounts()))

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    # Adjuster capabilities

    def adjust_plus(self, target: Any) -> Any:
        return target.plus_period(self)

    def adjust_minus(self, target: Any) -> Any:
        return target.minus_period(self)

    def to_canonical_string(self) -> str:
        """ISO-8601 duration, 'PT0S' for zero."""
        if self.is_zero():
            return "PT0S"
        text = "P"
        for amount, designator in ((self.years, "Y"), (self.months, "M"), (self.days, "D")):
            if amount:
                text += f"{amount}{designator}"
        if self.has_time:
            text += "T"
            if self.hours:
                text += f"{self.hours}H"
            if self.minutes:
                text += f"{self.minutes}M"
            if self.seconds or self.nanos:
                total = self.seconds * NANOS_PER_SECOND + self.nanos
                sign = "-" if total < 0 else ""
                whole, fraction = divmod(abs(total), NANOS_PER_SECOND)
                if fraction:
                    text += f"{sign}{whole}.{fraction:09d}".rstrip("0") + "S"
                else:
                    text += f"{sign}{whole}S"
        return text

    def __str__(self) -> str:
        return self.to_canonical_string()


Period.ZERO = Period()
