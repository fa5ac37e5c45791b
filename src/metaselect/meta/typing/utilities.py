"""Type annotation utility functions.

This module provides helper functions for working with Python type annotations:
resolving the declared return type of an accessor, checking union types, and
checking a value against the top level of an annotation.
"""
import logging
from typing import Any, Callable, Union, get_origin, get_args, get_type_hints
from types import UnionType, NoneType

logger = logging.getLogger(__name__)

type Annotation = Any


def is_union(annotation: Annotation) -> bool:
    """Check if an annotation is a union. A union is a Union or UnionType type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a union.
    """
    o = get_origin(annotation) or annotation
    return o in (Union, UnionType)


def matches_top_level(annotation: Annotation, value: Any) -> bool:
    """Check that a value matches the top level of an annotation.

    Only the outer type is checked: (1, "a") matches tuple[int, ...]. Unions match when one of
    their members matches. Annotations that cannot be checked with isinstance (Any, Literal, ...)
    always match.

    Args:
        annotation (Any): The annotation to check against.
        value (Any): The value to check.

    Returns:
        bool: Whether the value matches.
    """
    if annotation is Any:
        return True
    if annotation is None or annotation is NoneType:
        return value is None
    if is_union(annotation):
        return any(matches_top_level(a, value) for a in get_args(annotation))
    o = get_origin(annotation) or annotation
    if not isinstance(o, type):
        return True
    return isinstance(value, o)


def resolve_return_type(func: Callable[..., Any] | None, default: Annotation = Any) -> Annotation:
    """Get the declared return type of a function. See typing.get_type_hints.

    Forward references that cannot be resolved (for example a class local to a function, under
    `from __future__ import annotations`) are returned as written, usually a str, and the fallback
    is logged at debug level.

    Args:
        func (Callable | None): The function to inspect.
        default (Any, optional): Returned when there is no function or no return annotation.
            Defaults to Any.

    Returns:
        Any: The return type.
    """
    if func is None:
        return default
    try:
        return get_type_hints(func).get("return", default)
    except (NameError, TypeError) as e:
        raw = getattr(func, "__annotations__", {}).get("return", default)
        logger.debug(
            "Cannot resolve the return type of %s (%s), keeping %r as written.",
            getattr(func, "__qualname__", func),
            e,
            raw,
        )
        return raw
