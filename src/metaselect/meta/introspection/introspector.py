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
Description: The introspector builds and caches read-only descriptors of classes and of
            their declared properties. It exposes:
            - list_declared_properties: properties declared (not merely inherited) by a class
            - base_type: the nearest base class descriptor
            - explicit_annotations: metadata attached at one declaration
            - annotation_inheritance_flag: whether an annotation class is inherited by
              overriding declarations. Can be customized with register_annotation_type.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from functools import lru_cache
from typing import Any

from .annotations import attached_annotations
from .descriptors import MemberDescriptor, TypeDescriptor
from .errors import IntrospectionError
from .settings import IntrospectionSettings
from .visibility import effective_visibility
from ..typing.utilities import resolve_return_type

logger = logging.getLogger(__name__)


class Introspector:
    """
    A class to describe classes and their properties, and to hold the inheritance flags of
    annotation classes. Descriptors are built once per class and cached.
    """

    __descriptors: dict[type, TypeDescriptor]
    __inheritance_flags: dict[type, bool]

    def __init__(self) -> None:
        self.__descriptors = {}
        self.__inheritance_flags = {}

    def clear_cache(self) -> None:
        """Forget every descriptor built so far. Registered inheritance flags are kept."""
        self.__descriptors.clear()

    def register_annotation_type(self, annotation_type: type, inherited: bool) -> None:
        """Set the inheritance flag of an annotation class, overriding the one it declares.

        Args:
            annotation_type (type): The annotation class.
            inherited (bool): Whether declarations overriding an annotated property inherit it.

        Raises:
            IntrospectionError: Raised if annotation_type is not a class.
        """
        if not isinstance(annotation_type, type):
            raise IntrospectionError(
                f"Annotation type must be a class, got {annotation_type!r}."
            )
        self.__inheritance_flags[annotation_type] = bool(inherited)

    def annotation_inheritance_flag(self, annotation_type: type) -> bool:
        """Whether an annotation class is inherited by overriding declarations.

        Registered flags come first, then the `__inherited__` attribute of the class (see
        Annotation), then IntrospectionSettings.DEFAULT_INHERITED.

        Args:
            annotation_type (type): The annotation class.

        Returns:
            bool: The inheritance flag.
        """
        if annotation_type in self.__inheritance_flags:
            return self.__inheritance_flags[annotation_type]
        return bool(
            getattr(annotation_type, "__inherited__", IntrospectionSettings.DEFAULT_INHERITED)
        )

    def describe(self, cls: type) -> TypeDescriptor:
        """Get the descriptor of a class, building it on first use.

        Args:
            cls (type): The class to describe.

        Raises:
            IntrospectionError: Raised if cls is not a class.

        Returns:
            TypeDescriptor: The descriptor.
        """
        if not isinstance(cls, type):
            raise IntrospectionError(f"Only classes can be described, got {cls!r}.")
        descriptor = self.__descriptors.get(cls)
        if descriptor is None:
            descriptor = self.__build(cls)
            self.__descriptors[cls] = descriptor
        return descriptor

    def list_declared_properties(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """Properties declared by a class, in declaration order."""
        return self.describe(cls).properties

    def base_type(self, cls: type) -> TypeDescriptor | None:
        """Descriptor of the nearest base class, None for classes deriving from object only."""
        return self.describe(cls).base

    def explicit_annotations(self, member: MemberDescriptor) -> tuple[Any, ...]:
        """Metadata explicitly attached at the declaration of member."""
        return member.annotations

    def __build(self, cls: type) -> TypeDescriptor:
        logger.debug("Describing class %s.%s", cls.__module__, cls.__qualname__)
        mro = cls.__mro__
        base = self.describe(mro[1]) if len(mro) > 1 and mro[1] is not object else None
        properties = tuple(
            self.__describe_property(cls, name, value)
            for name, value in vars(cls).items()
            if isinstance(value, property)
        )
        return TypeDescriptor(type=cls, properties=properties, base=base)

    def __describe_property(self, cls: type, name: str, prop: property) -> MemberDescriptor:
        overrides = self.__overridden(cls, name)
        return MemberDescriptor(
            declaring_type=cls,
            name=name,
            return_type=resolve_return_type(prop.fget),
            visibility=effective_visibility(prop, name, cls),
            overrides=overrides,
            annotations=attached_annotations(prop, overrides.prop if overrides else None),
            is_abstract=bool(getattr(prop, "__isabstractmethod__", False)),
            prop=prop,
        )

    def __overridden(self, cls: type, name: str) -> MemberDescriptor | None:
        for ancestor in cls.__mro__[1:]:
            if isinstance(vars(ancestor).get(name), property):
                return next(
                    m for m in self.describe(ancestor).properties if m.name == name
                )
        return None


@lru_cache(1)
def introspector() -> Introspector:
    """Get the default introspector."""
    return Introspector()
