"""Errors of the introspection layer."""

from ...abstract.exceptions.traced_exceptions import TracedException


class IntrospectionError(TracedException):
    """Signals that an object cannot be introspected or decorated as requested."""
