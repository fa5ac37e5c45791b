"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-18
Description: Matching of properties against attached metadata.
            Overriding a property does not carry the metadata of the overridden declaration
            along. When matching "or inherit", the override chain is walked explicitly and
            metadata found on an overridden declaration only counts when its annotation
            class is inherited.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from ..introspection.descriptors import MemberDescriptor
from ..introspection.introspector import Introspector, introspector


def has_explicit_annotation(
    member: MemberDescriptor,
    annotation_type: type,
    registry: Introspector | None = None,
) -> bool:
    """Whether an instance of annotation_type is attached at the declaration of member.

    Args:
        member (MemberDescriptor): The property declaration.
        annotation_type (type): The annotation class, subclasses instances match too.
        registry (Introspector | None, optional): Introspector to query. Defaults to the
            default introspector.

    Returns:
        bool: Whether the annotation is attached at this declaration.
    """
    registry = registry or introspector()
    return any(isinstance(a, annotation_type) for a in registry.explicit_annotations(member))


def is_decorated_with(
    member: MemberDescriptor,
    annotation_type: type,
    inherit: bool = False,
    registry: Introspector | None = None,
) -> bool:
    """Whether a property is decorated with an annotation class.

    Without inherit, only the declaration of member is considered. With inherit, the overridden
    declarations are visited as well, from the nearest to the root one, but only when
    annotation_type is an inherited annotation class.

    Args:
        member (MemberDescriptor): The property declaration.
        annotation_type (type): The annotation class.
        inherit (bool, optional): Whether to consider overridden declarations. Defaults to False.
        registry (Introspector | None, optional): Introspector to query. Defaults to the
            default introspector.

    Returns:
        bool: Whether the property is decorated.
    """
    registry = registry or introspector()
    if has_explicit_annotation(member, annotation_type, registry):
        return True
    if not inherit or not registry.annotation_inheritance_flag(annotation_type):
        return False
    # stops at the nearest ancestor carrying the annotation
    return any(
        has_explicit_annotation(ancestor, annotation_type, registry)
        for ancestor in member.override_chain()[1:]
    )
