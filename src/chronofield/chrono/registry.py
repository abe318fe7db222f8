"""Lookup of chronology singletons by identity."""

from __future__ import annotations

from chronofield.chrono.base import Chronology, ChronologyId
from chronofield.chrono.coptic import COPTIC
from chronofield.chrono.hijrah import HIJRAH
from chronofield.chrono.iso import ISO
from chronofield.chrono.japanese import JAPANESE
from chronofield.chrono.offset import MINGUO, THAI_BUDDHIST
from chronofield.core.field import FieldRule

_REGISTRY: dict[ChronologyId, Chronology] = {
    chronology.id: chronology for chronology in (ISO, COPTIC, HIJRAH, JAPANESE, MINGUO, THAI_BUDDHIST)
}


def get_chronology(name: str | ChronologyId) -> Chronology:
    """Get a chronology by id or name, case-insensitively.

    Raises:
        KeyError: If no chronology has that name.
    """
    if isinstance(name, ChronologyId):
        return _REGISTRY[name]
    for chronology_id, chronology in _REGISTRY.items():
        if name.lower() in (chronology_id.value.lower(), chronology_id.name.lower()):
            return chronology
    raise KeyError(f"Unknown chronology: {name!r}")


def all_chronologies() -> tuple[Chronology, ...]:
    return tuple(_REGISTRY.values())


def restore_rule(chronology_id: str, ordinal: int) -> FieldRule:
    """Unpickling hook returning the canonical rule singleton."""
    return get_chronology(chronology_id).rule_for_ordinal(ordinal)
