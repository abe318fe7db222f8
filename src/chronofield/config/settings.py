"""Configuration settings using Pydantic Settings.

Provides typed resolver defaults with environment variable support.

Usage:
    from chronofield.config import ResolverSettings

    # Load from environment variables (CHRONOFIELD_*)
    settings = ResolverSettings()

    # Or override with explicit values
    settings = ResolverSettings(strictness="lenient", chronology="Coptic")
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for new resolution builders.

    Attributes:
        strictness: How conflicting field values are handled (strict, lenient).
        chronology: Name of the chronology builders resolve into.

    Environment Variables:
        CHRONOFIELD_STRICTNESS
        CHRONOFIELD_CHRONOLOGY
    """

    model_config = SettingsConfigDict(
        env_prefix="CHRONOFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strictness: Literal["strict", "lenient"] = "strict"
    chronology: str = "ISO"

    @field_validator("strictness", mode="before")
    @classmethod
    def _lowercase_strictness(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("chronology")
    @classmethod
    def _known_chronology(cls, value: str) -> str:
        from chronofield.chrono.registry import get_chronology

        try:
            return get_chronology(value).name
        except KeyError as e:
            raise ValueError(str(e)) from e
