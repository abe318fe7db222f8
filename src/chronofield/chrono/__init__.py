"""Calendar systems: one singleton per chronology plus the lookup registry."""

from chronofield.chrono.base import Chronology, ChronologyId, DateFields
from chronofield.chrono.coptic import COPTIC, CopticChronology
from chronofield.chrono.hijrah import HIJRAH, HijrahChronology
from chronofield.chrono.iso import ISO, IsoChronology
from chronofield.chrono.japanese import ERAS as JAPANESE_ERAS
from chronofield.chrono.japanese import JAPANESE, JapaneseChronology, JapaneseEra
from chronofield.chrono.offset import MINGUO, THAI_BUDDHIST, MinguoChronology, ThaiBuddhistChronology
from chronofield.chrono.registry import all_chronologies, get_chronology, restore_rule

__all__ = [
    # Base
    "Chronology",
    "ChronologyId",
    "DateFields",
    # Singletons
    "COPTIC",
    "HIJRAH",
    "ISO",
    "JAPANESE",
    "MINGUO",
    "THAI_BUDDHIST",
    # Classes
    "CopticChronology",
    "HijrahChronology",
    "IsoChronology",
    "JapaneseChronology",
    "JapaneseEra",
    "JAPANESE_ERAS",
    "MinguoChronology",
    "ThaiBuddhistChronology",
    # Registry
    "all_chronologies",
    "get_chronology",
    "restore_rule",
]
