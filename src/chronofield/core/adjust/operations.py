"""Pure functions enforcing chronology safety on adjuster results."""

from __future__ import annotations

from typing import TypeVar

from chronofield.core.adjust.models import ChronologyBound
from chronofield.core.errors import ChronologyMismatchError

T = TypeVar("T")


def check_same_chronology(target: T, candidate: object, operation: str) -> T:
    """Accept an adjuster's candidate only if it matches the target.

    The target is immutable, so a rejected candidate leaves nothing
    partially applied.

    Args:
        target: Value being adjusted.
        candidate: Value returned by the adjuster.
        operation: Entry point name for the error message.

    Returns:
        The candidate, typed as the target.

    Raises:
        TypeError: If the candidate is not of the target's value type.
        ChronologyMismatchError: If the candidate belongs to another chronology.
    """
    if candidate is None:
        raise TypeError(f"Adjuster passed to {operation} must not return None")
    if not isinstance(candidate, type(target)) or not isinstance(candidate, ChronologyBound):
        raise TypeError(
            f"Adjuster passed to {operation} returned {type(candidate).__name__}, "
            f"required {type(target).__name__}"
        )
    expected = target.chronology  # type: ignore[attr-defined]
    if candidate.chronology.id != expected.id:
        raise ChronologyMismatchError(expected, candidate.chronology, operation)
    return candidate  # type: ignore[return-value]
