"""Fluent selection of class properties."""

from .collector import collect_types, module_classes
from .errors import InvalidInputError, NullSelectorError
from .matcher import has_explicit_annotation, is_decorated_with
from .operations import (
    that_are_public_or_internal,
    that_are_not_public_or_internal,
    that_are_abstract,
    that_are_not_abstract,
    of_type,
    not_of_type,
    that_are_decorated_with,
    that_are_not_decorated_with,
    that_are_decorated_with_or_inherit,
    that_are_not_decorated_with_or_inherit,
    to_sequence,
    return_types,
)
from .selector import PropertySelector, select_properties

__all__ = [
    # Core classes
    "PropertySelector",
    # Main API functions
    "select_properties",
    "collect_types",
    "module_classes",
    "has_explicit_annotation",
    "is_decorated_with",
    # Free function operations
    "that_are_public_or_internal",
    "that_are_not_public_or_internal",
    "that_are_abstract",
    "that_are_not_abstract",
    "of_type",
    "not_of_type",
    "that_are_decorated_with",
    "that_are_not_decorated_with",
    "that_are_decorated_with_or_inherit",
    "that_are_not_decorated_with_or_inherit",
    "to_sequence",
    "return_types",
    # Errors
    "InvalidInputError",
    "NullSelectorError",
]
