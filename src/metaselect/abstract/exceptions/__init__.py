"""Exception utilities for metaselect."""

from .traced_exceptions import TracedException, ParameterError, format_exception

__all__ = [
    "TracedException",
    "ParameterError",
    "format_exception",
]
