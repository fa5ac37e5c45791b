"""Errors raised while building property selections."""

from ...abstract.exceptions.traced_exceptions import ParameterError


class InvalidInputError(ParameterError):
    """Signals a missing or unusable input given to a selection."""


class NullSelectorError(ParameterError):
    """Signals an operation invoked without a selector to operate on."""
