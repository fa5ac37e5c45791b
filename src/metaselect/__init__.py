"""
metaselect: Fluent selection of class properties by metadata.

This library provides:
- PropertySelector to select the properties of classes or modules by visibility, return type
  and attached metadata, with inheritance aware matching along override chains
- Annotation and decorated_with to attach metadata to properties
- ConstantNamespace for immutable class-level constants
- TracedException for enhanced exception formatting
"""

from .meta.introspection import (
    Annotation,
    Introspector,
    MemberDescriptor,
    TypeDescriptor,
    Visibility,
    decorated_with,
    introspector,
    public,
    internal,
    protected,
    private,
)
from .meta.selection import (
    PropertySelector,
    select_properties,
    InvalidInputError,
    NullSelectorError,
)

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Selection
    "PropertySelector",
    "select_properties",
    # Metadata
    "Annotation",
    "decorated_with",
    "public",
    "internal",
    "protected",
    "private",
    # Introspection
    "Introspector",
    "MemberDescriptor",
    "TypeDescriptor",
    "Visibility",
    "introspector",
    # Errors
    "InvalidInputError",
    "NullSelectorError",
]
