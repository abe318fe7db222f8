"""Tests for ResolutionBuilder.

Why these tests exist:
- The builder is the only entry point the parsing layer uses
- Strict and lenient policies must be deterministic regardless of input order
"""

import itertools
import logging

import pytest

from chronofield import (
    COPTIC,
    ISO,
    JAPANESE,
    ChronologyMismatchError,
    FieldKind,
    IncompleteResolutionError,
    LocalTime,
    OutOfRangeError,
    ResolutionBuilder,
    ResolutionConflictError,
    ResolverConfig,
    Strictness,
)


def _builder(chronology, strictness=Strictness.STRICT, **values):
    builder = ResolutionBuilder(chronology, ResolverConfig(strictness=strictness))
    for name, value in values.items():
        builder.add_field_value(chronology.rule(FieldKind[name]), value)
    return builder


@pytest.mark.parametrize(
    "order",
    list(itertools.permutations([(FieldKind.DAY_OF_YEAR, 40), (FieldKind.YEAR, 3)])),
    ids=["doy-first", "year-first"],
)
def test_coptic_day_of_year_and_year(order):
    """CRITICAL: Day-of-year plus year resolves month and day regardless of order.

    Why: Parsers emit fields in pattern order, which varies by format.
    """
    builder = ResolutionBuilder(COPTIC, ResolverConfig())
    for kind, value in order:
        builder.add_field_value(COPTIC.rule(kind), value)
    date = builder.resolve_date()
    assert date.get(COPTIC.rule(FieldKind.DAY_OF_MONTH)) == 10
    assert date.get(COPTIC.rule(FieldKind.MONTH_OF_YEAR)) == 2
    assert date == COPTIC.date(3, 2, 10)


def test_builder_is_not_modified_by_resolution(coptic_builder):
    coptic_builder.add_field_value(COPTIC.rule(FieldKind.DAY_OF_YEAR), 40)
    coptic_builder.add_field_value(COPTIC.rule(FieldKind.YEAR), 3)
    coptic_builder.resolve()
    assert coptic_builder.known_values() == {
        COPTIC.rule(FieldKind.DAY_OF_YEAR): 40,
        COPTIC.rule(FieldKind.YEAR): 3,
    }


def test_add_rejects_other_chronology(coptic_builder):
    with pytest.raises(ChronologyMismatchError):
        coptic_builder.add_field_value(ISO.rule(FieldKind.YEAR), 2024)


def test_add_rejects_out_of_range(coptic_builder):
    with pytest.raises(OutOfRangeError, match="CopticMonthOfYear"):
        coptic_builder.add_field_value(COPTIC.rule(FieldKind.MONTH_OF_YEAR), 14)


def test_full_date_time():
    builder = _builder(ISO, YEAR=2024, MONTH_OF_YEAR=2, DAY_OF_MONTH=29, HOUR_OF_DAY=13, MINUTE_OF_HOUR=5)
    assert builder.resolve() == ISO.date_time(2024, 2, 29, 13, 5)


def test_no_time_fields_resolve_to_midnight():
    assert _builder(ISO, YEAR=2024, DAY_OF_YEAR=60).resolve() == ISO.date_time(2024, 2, 29)


def test_time_from_nano_of_day():
    builder = _builder(ISO, YEAR=2024, DAY_OF_YEAR=1, NANO_OF_DAY=3_600_000_000_001)
    assert builder.resolve().time == LocalTime.of(1, 0, 0, 1)


def test_resolve_time_only():
    assert _builder(COPTIC, SECOND_OF_DAY=3661).resolve_time() == LocalTime.of(1, 1, 1)


def test_year_from_era_fields():
    assert _builder(ISO, ERA=0, YEAR_OF_ERA=1, MONTH_OF_YEAR=1, DAY_OF_MONTH=1).resolve_date() == ISO.date(0, 1, 1)


def test_year_of_era_alone_uses_current_era():
    builder = _builder(JAPANESE, YEAR_OF_ERA=6, MONTH_OF_YEAR=6, DAY_OF_MONTH=1)
    assert builder.resolve_date() == JAPANESE.date(2024, 6, 1)


def test_incomplete():
    with pytest.raises(IncompleteResolutionError):
        _builder(ISO, MONTH_OF_YEAR=1, DAY_OF_MONTH=1).resolve()
    with pytest.raises(IncompleteResolutionError):
        _builder(ISO, YEAR=2024, MONTH_OF_YEAR=1).resolve()
    with pytest.raises(IncompleteResolutionError):
        _builder(ISO, YEAR=2024, DAY_OF_YEAR=1, MINUTE_OF_HOUR=5).resolve()


def test_strict_conflict_between_supplied_and_derived():
    builder = _builder(COPTIC, YEAR=3, DAY_OF_YEAR=40, DAY_OF_MONTH=11)
    with pytest.raises(ResolutionConflictError, match="CopticDayOfMonth") as info:
        builder.resolve()
    assert {info.value.first, info.value.second} == {10, 11}


def test_strict_conflict_found_by_cross_check():
    """Supplied values that no derivation links are still checked against the result."""
    builder = _builder(ISO, YEAR=2024, MONTH_OF_YEAR=3, DAY_OF_MONTH=1, DAY_OF_YEAR=1)
    with pytest.raises(ResolutionConflictError, match="DayOfYear"):
        builder.resolve()


def test_japanese_era_mismatch_is_a_conflict():
    builder = _builder(JAPANESE, YEAR=1989, MONTH_OF_YEAR=1, DAY_OF_MONTH=7, ERA=2)
    with pytest.raises(ResolutionConflictError, match="JapaneseEra"):
        builder.resolve()


def test_duplicate_value_warns_and_strict_reports_first_writer():
    builder = _builder(ISO, YEAR=2024, MONTH_OF_YEAR=1, DAY_OF_MONTH=1)
    with pytest.warns(UserWarning, match="Year"):
        builder.add_field_value(ISO.rule(FieldKind.YEAR), 2025)
    with pytest.raises(ResolutionConflictError) as info:
        builder.resolve()
    assert (info.value.first, info.value.second) == (2024, 2025)
    assert builder.resolve(Strictness.LENIENT) == ISO.date_time(2025, 1, 1)


def test_same_value_twice_is_not_a_duplicate(recwarn):
    builder = _builder(ISO, YEAR=2024, MONTH_OF_YEAR=1, DAY_OF_MONTH=1)
    builder.add_field_value(ISO.rule(FieldKind.YEAR), 2024)
    assert len(recwarn) == 0
    assert builder.resolve() == ISO.date_time(2024, 1, 1)


def test_lenient_supplied_beats_derived(caplog):
    builder = _builder(COPTIC, Strictness.LENIENT, YEAR=3, DAY_OF_YEAR=40, MONTH_OF_YEAR=3)
    with caplog.at_level(logging.DEBUG, logger="chronofield.resolve"):
        date = builder.resolve_date()
    assert date == COPTIC.date(3, 3, 10)
    assert "Discarding" in caplog.text


_DISAGREEING_TIME_SOURCES = [
    (FieldKind.YEAR, 2024),
    (FieldKind.DAY_OF_YEAR, 1),
    (FieldKind.NANO_OF_DAY, 3_600_000_000_000),
    (FieldKind.SECOND_OF_DAY, 7200),
]


@pytest.mark.parametrize(
    "order",
    list(itertools.permutations(_DISAGREEING_TIME_SOURCES)),
)
def test_lenient_result_ignores_insertion_order(order):
    """CRITICAL: Lenient resolution of disagreeing sources never depends on input order.

    Why: Two parsers emitting the same fields in different pattern order
    must produce the same date-time; the finest source wins.
    """
    builder = ResolutionBuilder(ISO, ResolverConfig(strictness=Strictness.LENIENT))
    for kind, value in order:
        builder.add_field_value(ISO.rule(kind), value)
    assert builder.resolve() == ISO.date_time(2024, 1, 1, 1)


@pytest.mark.parametrize(
    "order",
    list(itertools.permutations(_DISAGREEING_TIME_SOURCES[2:])),
    ids=["nano-first", "second-first"],
)
def test_strict_rejects_disagreeing_time_sources(order):
    builder = ResolutionBuilder(ISO, ResolverConfig())
    for kind, value in order:
        builder.add_field_value(ISO.rule(kind), value)
    with pytest.raises(ResolutionConflictError):
        builder.resolve_time()


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ({"YEAR": 2023, "MONTH_OF_YEAR": 2, "DAY_OF_MONTH": 30}, ISO.date(2023, 3, 2)),
        ({"YEAR": 2023, "DAY_OF_YEAR": 366}, ISO.date(2024, 1, 1)),
    ],
    ids=["day-of-month", "day-of-year"],
)
def test_lenient_day_rolls_over(values, expected):
    assert _builder(ISO, Strictness.LENIENT, **values).resolve_date() == expected
    with pytest.raises(OutOfRangeError):
        _builder(ISO, Strictness.STRICT, **values).resolve_date()


def test_strictness_defaults_from_settings(monkeypatch):
    monkeypatch.setenv("CHRONOFIELD_STRICTNESS", "lenient")
    monkeypatch.setenv("CHRONOFIELD_CHRONOLOGY", "coptic")
    builder = ResolutionBuilder()
    assert builder.config.strictness is Strictness.LENIENT
    assert builder.chronology is COPTIC
