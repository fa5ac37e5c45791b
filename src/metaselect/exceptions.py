"""
Re-export exceptions module for cleaner imports.

This allows: from metaselect.exceptions import InvalidInputError
Instead of: from metaselect.meta.selection.errors import InvalidInputError
"""

from .abstract.exceptions.traced_exceptions import (
    TracedException,
    ParameterError,
    format_exception,
)
from .meta.introspection.errors import IntrospectionError
from .meta.selection.errors import InvalidInputError, NullSelectorError

__all__ = [
    "TracedException",
    "ParameterError",
    "format_exception",
    "IntrospectionError",
    "InvalidInputError",
    "NullSelectorError",
]
