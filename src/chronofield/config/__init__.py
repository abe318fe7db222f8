"""Configuration module using Pydantic Settings.

Usage:
    from chronofield.config import ResolverSettings

    settings = ResolverSettings(strictness="lenient")
"""

from chronofield.config.settings import ResolverSettings

__all__ = [
    "ResolverSettings",
]
