"""Core type definitions for chronofield."""

from typing import TypeAlias

EpochDay: TypeAlias = int
"""Day count relative to 1970-01-01 in the ISO calendar.

Every chronology converts to and from this shared scale, which is what makes
two dates in different calendar systems comparable at all.
"""

NanoOfDay: TypeAlias = int
"""Nanoseconds elapsed since midnight, from 0 to NANOS_PER_DAY - 1."""

FieldValue: TypeAlias = int
"""Raw value of a calendar field as exchanged with the parsing layer."""
