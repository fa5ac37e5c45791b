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
Description: Namespaces (class) of checked, read-only constants. Used to hold the fixed
            settings of the introspection layer.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, NoReturn, Callable, ClassVar
from ...abstract.exceptions.traced_exceptions import TracedException
from ..typing.utilities import matches_top_level


class ConstantsInstantiationError(TracedException):
    """Instantiation error of a Constants class."""


class ConstantsCompositionError(TracedException):
    """Composition error of a Constants class."""


class ConstantsModificationError(TracedException):
    """Modification error of a Constants class."""


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disalowed function is added.
    Disallowed functions are __new__ and __init__.

    Args:
        name (str): name of the class.
        namespace (dict[str, Any]): namespace of the class.

    Raises:
        ConstantsCompositionError: Raised when a disallowed function is added.
    """
    if "__init__" in namespace or "__new__" in namespace:
        raise ConstantsCompositionError(
            f"Constant class '{name}' is disallowed to have __new__ or __init__"
            " method since it shall never be instantiated."
        )


def _instantiation_error(name: str) -> Callable[[Any], NoReturn]:
    """Helper to format an error message when trying to instantiate a Constants class.

    Args:
        name (str): name of the class.

    Returns:
        Callable[[], NoReturn]: A callable that throws an instantiation error when called.
    """

    def f(_: Any) -> NoReturn:
        raise ConstantsInstantiationError(
            f"Cannot instantiate constant class '{name}'. Constant class cannot be instantiated."
        )

    return f


def _verify_annotations(name: str, namespace: dict[str, Any], annotations: dict[str, Any]) -> None:
    """Verify that every constant has a value matching the top level of its annotation.

    Args:
        name (str): name of the class.
        namespace (dict[str, Any]): namespace of the class.
        annotations (dict[str, Any]): annotations of the class body.

    Raises:
        ConstantsCompositionError: Raised when a value is missing or does not match.
    """
    for key in namespace["__constants__"]:
        if key not in annotations:
            continue
        if key not in namespace:
            raise ConstantsCompositionError(
                f"Attribute '{key}' needs a value in constant class '{name}'."
            )
        if not matches_top_level(annotations[key], namespace[key]):
            raise ConstantsCompositionError(
                f"Value {namespace[key]!r} of constant '{key}' in class '{name}' does not match"
                f" its annotation {annotations[key]!r}."
            )


def _class_annotations(namespace: dict[str, Any]) -> dict[str, Any]:
    """Annotations of a class body being created, with or without deferred evaluation."""
    if "__annotations__" in namespace:
        return namespace["__annotations__"]
    annotate = namespace.get("__annotate__") or namespace.get("__annotate_func__")
    if annotate is None:
        return {}
    return annotate(1)


def _origin_name(annotation: Any) -> str:
    """Name of the outer construct of an annotation, works for string annotations too."""
    if isinstance(annotation, str):
        return annotation.split("[", 1)[0].rsplit(".", 1)[-1]
    origin = getattr(annotation, "__origin__", annotation)
    return getattr(origin, "_name", None) or getattr(origin, "__name__", "")


class ConstantsMetaclass(type):
    __constants__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        allow_private: bool = False,
        **kwargs: Any,
    ) -> Any:

        _verify_functions(name, namespace)

        namespace["__new__"] = _instantiation_error(name)

        annotations = {
            k: v for k, v in _class_annotations(namespace).items() if _origin_name(v) != "ClassVar"
        }
        namespace["__constants__"] = tuple(
            k for k in annotations if allow_private or not k.startswith("_")
        )

        # superclass constants come first
        for base in reversed(bases):
            if isinstance(base, ConstantsMetaclass) and base.__constants__:
                existing = set(base.__constants__)
                namespace["__constants__"] = base.__constants__ + tuple(
                    k for k in namespace["__constants__"] if k not in existing
                )

        _verify_annotations(name, namespace, annotations)

        return super().__new__(mcs, name, bases, namespace, **kwargs)

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be modified. Reason: Constant"
            " class cannot be modified."
        )

    def __repr__(cls) -> str:
        """Returns a string representation of the class."""
        constants = ", ".join(f"{k}={getattr(cls, k)!r}" for k in cls.__constants__)
        return f"<ConstantNamespace {cls.__name__}({constants})>"


class ConstantNamespace(metaclass=ConstantsMetaclass, allow_private=False):
    """Base class to create namespaces (class) of constants.
    Examples:
        >>> class MyConstants(ConstantNamespace):
        ...    A = 1 # this is not a constant. It needs annotation.
        ...    _A: int = 1 # this is not a constant unless allow_private=True.
        ...    B: int = 2 # this is a constant.
        ...    C: int = "3" # raises ConstantsCompositionError.

        >>> MyConstants.B
        2

        >>> MyConstants.B = 3 # raises ConstantsModificationError.
    """

    __constants__: ClassVar[tuple[str, ...]]
