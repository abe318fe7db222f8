"""Resolution models: strictness policy and builder configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Strictness(Enum):
    """How a builder treats values that disagree.

    STRICT: Any disagreement between supplied or derived values fails.
    LENIENT: Supplied values beat derived ones, the first derivation beats
        later ones, and a day past the end of its month or year rolls over.
    """

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Configuration consumed by ResolutionBuilder.

    Attributes:
        strictness: Default policy for resolve().
        chronology: Name of the chronology new builders resolve into.
    """

    strictness: Strictness = Strictness.STRICT
    chronology: str = "ISO"

    @classmethod
    def from_settings(cls) -> ResolverConfig:
        """Build from ResolverSettings (environment and .env file)."""
        from chronofield.config.settings import ResolverSettings

        settings = ResolverSettings()
        return cls(strictness=Strictness(settings.strictness), chronology=settings.chronology)
