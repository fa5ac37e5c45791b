"""Introspection of classes, their properties and the metadata attached to them."""

from .annotations import Annotation, decorated_with, attached_annotations
from .descriptors import MemberDescriptor, TypeDescriptor
from .errors import IntrospectionError
from .introspector import Introspector, introspector
from .settings import IntrospectionSettings
from .visibility import (
    Visibility,
    public,
    internal,
    protected,
    private,
    visibility_from_name,
    effective_visibility,
)

__all__ = [
    # Core classes
    "Introspector",
    "MemberDescriptor",
    "TypeDescriptor",
    "Visibility",
    "Annotation",
    "IntrospectionSettings",
    # Main API functions
    "introspector",
    "decorated_with",
    "attached_annotations",
    "public",
    "internal",
    "protected",
    "private",
    "visibility_from_name",
    "effective_visibility",
    # Errors
    "IntrospectionError",
]
