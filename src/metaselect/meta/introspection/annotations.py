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
Description: Structured metadata attached to property declarations. This includes:
            - Annotation: optional base class of metadata objects, its subclasses choose
              whether they are inherited by overriding properties with the class keyword
              `inherited`.
            - decorated_with: decorator attaching metadata objects to a property or to one
              of its accessors.
            - attached_annotations: the metadata explicitly attached to a property.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Callable, ClassVar

from .errors import IntrospectionError
from .settings import IntrospectionSettings


class Annotation:
    """Base class for metadata attached to properties.

    The inheritance flag belongs to the annotation class, not to its instances. It is inherited
    by subclasses unless they set their own.

    Examples:
        >>> class Audited(Annotation, inherited=False):
        ...     pass

        >>> class Model:
        ...     @property
        ...     @decorated_with(Audited("owner"))
        ...     def owner(self) -> str:
        ...         return "me"
    """

    __inherited__: ClassVar[bool] = IntrospectionSettings.DEFAULT_INHERITED

    def __init_subclass__(cls, inherited: bool | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if inherited is not None:
            cls.__inherited__ = bool(inherited)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        if self.value is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.value!r})"


def _accessors(prop: property) -> list[Callable[..., Any]]:
    return [
        a
        for a in (getattr(prop, attr, None) for attr in IntrospectionSettings.ACCESSOR_ATTRIBUTES)
        if a is not None
    ]


def _attach(target: Callable[..., Any], annotations: tuple[Any, ...]) -> None:
    existing = getattr(target, IntrospectionSettings.ANNOTATIONS_ATTRIBUTE, ())
    # decorators apply bottom-up, keep the source order
    setattr(target, IntrospectionSettings.ANNOTATIONS_ATTRIBUTE, annotations + tuple(existing))


def decorated_with[T](*annotations: Any) -> Callable[[T], T]:
    """Attach metadata objects to a property declaration.

    Can decorate a getter, setter or deleter function (below @property / @x.setter) or a
    property object (above @property or @x.setter, the metadata is then stored on its last
    accessor, the one most recently defined).
    Stacking several decorators accumulates the metadata.

    Args:
        *annotations (Any): The metadata objects. Their class is their type identity.

    Returns:
        Callable[[T], T]: The decorator.
    """

    def decorator(target: T) -> T:
        if isinstance(target, property):
            accessors = _accessors(target)
            if not accessors:
                raise IntrospectionError("Cannot decorate a property without accessors.")
            _attach(accessors[-1], annotations)
        elif callable(target):
            _attach(target, annotations)
        else:
            raise IntrospectionError(
                f"decorated_with expects a property or an accessor function, got {target!r}."
            )
        return target

    return decorator


def attached_annotations(prop: property, overridden: property | None = None) -> tuple[Any, ...]:
    """Metadata explicitly attached to a property, over all its accessors, in accessor order.

    A property extended in a subclass with `@Base.x.setter` reuses the accessors of the base
    declaration. Accessors shared with the overridden property belong to that declaration and are
    skipped.

    Args:
        prop (property): The property.
        overridden (property | None, optional): The property it overrides. Defaults to None.

    Returns:
        tuple[Any, ...]: The attached metadata objects, without duplicates.
    """
    seen: set[int] = set()
    result: list[Any] = []
    for attr in IntrospectionSettings.ACCESSOR_ATTRIBUTES:
        accessor = getattr(prop, attr, None)
        if accessor is None or (
            overridden is not None and getattr(overridden, attr, None) is accessor
        ):
            continue
        for annotation in getattr(accessor, IntrospectionSettings.ANNOTATIONS_ATTRIBUTE, ()):
            if id(annotation) not in seen:
                seen.add(id(annotation))
                result.append(annotation)
    return tuple(result)
