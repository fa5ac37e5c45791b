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
Description: This module provides the property selector, a chainable and immutable query over
            the properties declared by a set of classes. Filters only remove properties and
            never reorder them, so they can be chained in any order.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Callable, Iterator
from types import NoneType
from typing import Any

from .collector import TypeSource, collect_types
from .errors import InvalidInputError
from .matcher import is_decorated_with
from ..introspection.descriptors import MemberDescriptor
from ..introspection.introspector import Introspector, introspector

logger = logging.getLogger(__name__)

type MemberPredicate = Callable[[MemberDescriptor], bool]


def _annotation_type(annotation_type: Any) -> type:
    if not isinstance(annotation_type, type):
        raise InvalidInputError(
            "annotation_type", f"Expected an annotation class, got {annotation_type!r}."
        )
    return annotation_type


class PropertySelector:
    """Selection of the properties declared by one or more classes.

    Every filter returns a new selector, the receiver is left untouched.

    Examples:
        >>> selected = (
        ...     PropertySelector(Order)
        ...     .that_are_public_or_internal
        ...     .of_type(str)
        ...     .that_are_decorated_with(Audited)
        ... )
        >>> [m.name for m in selected.to_sequence()]
        ['owner']
    """

    __slots__ = ("__members", "__registry")

    __members: tuple[MemberDescriptor, ...]
    __registry: Introspector

    def __init__(self, types: TypeSource | None, *, registry: Introspector | None = None) -> None:
        """Select the properties declared by the given classes.

        Args:
            types (TypeSource | None): A class, a module whose classes are all used, or an
                iterable of classes and modules.
            registry (Introspector | None, optional): Introspector to describe the classes with.
                Defaults to the default introspector.

        Raises:
            InvalidInputError: Raised if types is None or invalid.
        """
        self.__registry = registry or introspector()
        members: dict[MemberDescriptor, None] = {}
        for cls in collect_types(types):
            members.update(dict.fromkeys(self.__registry.list_declared_properties(cls)))
        self.__members = tuple(members)
        logger.debug("Selected %d property(ies)", len(self.__members))

    @classmethod
    def _from_members(
        cls, members: tuple[MemberDescriptor, ...], registry: Introspector
    ) -> PropertySelector:
        selector = cls.__new__(cls)
        selector.__members = members
        selector.__registry = registry
        return selector

    def _where(self, predicate: MemberPredicate) -> PropertySelector:
        members = tuple(m for m in self.__members if predicate(m))
        logger.debug("Filter kept %d of %d property(ies)", len(members), len(self.__members))
        return self._from_members(members, self.__registry)

    # =========================================================================
    # Visibility
    # =========================================================================

    @property
    def that_are_public_or_internal(self) -> PropertySelector:
        """Only keep the properties with a public or internal accessor."""
        return self._where(lambda m: m.visibility.is_public_or_internal)

    @property
    def that_are_not_public_or_internal(self) -> PropertySelector:
        """Only keep the properties whose accessors are all protected or private."""
        return self._where(lambda m: not m.visibility.is_public_or_internal)

    # =========================================================================
    # Abstractness
    # =========================================================================

    @property
    def that_are_abstract(self) -> PropertySelector:
        """Only keep the abstract properties."""
        return self._where(lambda m: m.is_abstract)

    @property
    def that_are_not_abstract(self) -> PropertySelector:
        """Only keep the concrete properties."""
        return self._where(lambda m: not m.is_abstract)

    # =========================================================================
    # Return type
    # =========================================================================

    def of_type(self, return_type: Any) -> PropertySelector:
        """Only keep the properties whose declared return type is exactly return_type.

        Subclasses do not match: a property returning bool is not of type int. Return annotations
        that cannot be resolved are compared as written (usually a str), so of_type(LocalClass)
        does not match a property annotated with an unresolvable "LocalClass" reference.

        Args:
            return_type (Any): The return type. None stands for NoneType.

        Returns:
            PropertySelector: The filtered selector.
        """
        expected = NoneType if return_type is None else return_type
        return self._where(lambda m: m.return_type == expected)

    def not_of_type(self, return_type: Any) -> PropertySelector:
        """Only keep the properties whose declared return type is not exactly return_type."""
        expected = NoneType if return_type is None else return_type
        return self._where(lambda m: m.return_type != expected)

    # =========================================================================
    # Metadata
    # =========================================================================

    def that_are_decorated_with(self, annotation_type: type) -> PropertySelector:
        """Only keep the properties declared with an instance of annotation_type attached.

        Metadata of overridden declarations is not considered.

        Args:
            annotation_type (type): The annotation class.

        Raises:
            InvalidInputError: Raised if annotation_type is not a class.

        Returns:
            PropertySelector: The filtered selector.
        """
        annotation_type = _annotation_type(annotation_type)
        return self._where(lambda m: is_decorated_with(m, annotation_type, False, self.__registry))

    def that_are_not_decorated_with(self, annotation_type: type) -> PropertySelector:
        """Complement of that_are_decorated_with."""
        annotation_type = _annotation_type(annotation_type)
        return self._where(
            lambda m: not is_decorated_with(m, annotation_type, False, self.__registry)
        )

    def that_are_decorated_with_or_inherit(self, annotation_type: type) -> PropertySelector:
        """Only keep the properties decorated with annotation_type, either at their declaration
        or, for inherited annotation classes, at a declaration they override.

        Args:
            annotation_type (type): The annotation class.

        Raises:
            InvalidInputError: Raised if annotation_type is not a class.

        Returns:
            PropertySelector: The filtered selector.
        """
        annotation_type = _annotation_type(annotation_type)
        return self._where(lambda m: is_decorated_with(m, annotation_type, True, self.__registry))

    def that_are_not_decorated_with_or_inherit(self, annotation_type: type) -> PropertySelector:
        """Complement of that_are_decorated_with_or_inherit."""
        annotation_type = _annotation_type(annotation_type)
        return self._where(
            lambda m: not is_decorated_with(m, annotation_type, True, self.__registry)
        )

    # =========================================================================
    # Materialization
    # =========================================================================

    def to_sequence(self) -> tuple[MemberDescriptor, ...]:
        """The selected properties, in selection order."""
        return self.__members

    def return_types(self) -> tuple[Any, ...]:
        """The declared return types of the selected properties, in selection order.
        Duplicates are kept."""
        return tuple(m.return_type for m in self.__members)

    def __iter__(self) -> Iterator[MemberDescriptor]:
        return iter(self.__members)

    def __len__(self) -> int:
        return len(self.__members)

    def __contains__(self, member: object) -> bool:
        return member in self.__members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertySelector):
            return NotImplemented
        return self.__members == other.__members

    def __hash__(self) -> int:
        return hash(self.__members)

    def __repr__(self) -> str:
        names = ", ".join(m.qualified_name for m in self.__members)
        return f"<PropertySelector ({names})>"


def select_properties(
    types: TypeSource | None, *, registry: Introspector | None = None
) -> PropertySelector:
    """Select the properties declared by a class, an iterable of classes or a module.

    Raises:
        InvalidInputError: Raised if types is None or invalid.
    """
    return PropertySelector(types, registry=registry)
