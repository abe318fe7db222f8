"""Resolution of partial or overlapping field values into date-times.

Usage:
    from chronofield.resolve import ResolutionBuilder, Strictness

    builder = ResolutionBuilder(ISO)
    builder.add_field_value(ISO.rule(FieldKind.YEAR), 2024)
    ...
    builder.resolve(Strictness.LENIENT)
"""

from chronofield.resolve.builder import ResolutionBuilder
from chronofield.resolve.models import ResolverConfig, Strictness
from chronofield.resolve.operations import assemble_date, assemble_time, cross_check, derive_values

__all__ = [
    "ResolutionBuilder",
    "ResolverConfig",
    "Strictness",
    "assemble_date",
    "assemble_time",
    "cross_check",
    "derive_values",
]
