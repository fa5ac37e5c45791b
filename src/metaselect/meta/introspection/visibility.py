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
Description: Accessor visibility of properties. Python has no access modifiers, so the
            visibility of an accessor is either set explicitly with the public, internal,
            protected and private decorators or derived from the member name:
            - __name (mangled): private
            - _name: protected
            - anything else: public
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from enum import IntEnum
from typing import Any, Callable

from .settings import IntrospectionSettings


class Visibility(IntEnum):
    """Accessibility of a property accessor, ordered from the most restrictive to the most
    permissive so that max() gives the effective visibility of a property.

    PRIVATE: only the declaring class.
    PROTECTED: the declaring class and its subclasses.
    INTERNAL: the declaring module or package.
    PUBLIC: everyone.
    """

    PRIVATE = 0
    PROTECTED = 1
    INTERNAL = 2
    PUBLIC = 3

    @property
    def is_public_or_internal(self) -> bool:
        """Whether the visibility is PUBLIC or INTERNAL."""
        return self >= Visibility.INTERNAL


def _marker[F: Callable[..., Any]](visibility: Visibility) -> Callable[[F], F]:
    def mark(accessor: F) -> F:
        setattr(accessor, IntrospectionSettings.VISIBILITY_ATTRIBUTE, visibility)
        return accessor

    mark.__name__ = visibility.name.lower()
    mark.__doc__ = f"Mark a property accessor as {visibility.name.lower()}."
    return mark


public = _marker(Visibility.PUBLIC)
internal = _marker(Visibility.INTERNAL)
protected = _marker(Visibility.PROTECTED)
private = _marker(Visibility.PRIVATE)


def visibility_from_name(name: str, owner: type | None = None) -> Visibility:
    """Visibility implied by the name of a class member.

    Args:
        name (str): The member name as found in the class __dict__.
        owner (type | None, optional): The declaring class, used to recognize mangled
            (_Owner__name) private names. Defaults to None.

    Returns:
        Visibility: The implied visibility. Dunder names are public.
    """
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    if name.startswith("__"):
        return Visibility.PRIVATE
    if owner is not None and name.startswith(f"_{owner.__name__.lstrip('_')}__"):
        return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def accessor_visibility(accessor: Any, name: str, owner: type | None = None) -> Visibility:
    """Visibility of a single accessor: its explicit marker if any, else the member name's."""
    explicit = getattr(accessor, IntrospectionSettings.VISIBILITY_ATTRIBUTE, None)
    if explicit is not None:
        return Visibility(explicit)
    return visibility_from_name(name, owner)


def effective_visibility(prop: property, name: str, owner: type | None = None) -> Visibility:
    """Most permissive visibility among the accessors of a property.

    Args:
        prop (property): The property.
        name (str): Name of the property in its declaring class.
        owner (type | None, optional): The declaring class. Defaults to None.

    Returns:
        Visibility: The effective visibility. A property without accessors gets the visibility
        of its name.
    """
    accessors = [
        a
        for a in (getattr(prop, attr, None) for attr in IntrospectionSettings.ACCESSOR_ATTRIBUTES)
        if a is not None
    ]
    if not accessors:
        return visibility_from_name(name, owner)
    return max(accessor_visibility(a, name, owner) for a in accessors)
