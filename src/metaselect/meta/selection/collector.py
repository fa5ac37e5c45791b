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
Description: Turns a class, a module, or an iterable of classes and modules into the ordered,
            duplicate free tuple of classes whose properties are selected.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Iterable, Iterator
from types import ModuleType

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

type TypeSource = type | ModuleType | Iterable[type | ModuleType]

TYPES_PARAMETER = "types"


def _nested_classes(cls: type) -> Iterator[type]:
    """Classes declared in the body of cls, recursively, in declaration order."""
    for value in vars(cls).values():
        if isinstance(value, type) and value.__qualname__ == f"{cls.__qualname__}.{value.__name__}":
            yield value
            yield from _nested_classes(value)


def module_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in a module, including nested ones. Imported classes are skipped.

    Args:
        module (ModuleType): The module to scan.

    Yields:
        type: The classes, in definition order.
    """
    for value in vars(module).values():
        if isinstance(value, type) and value.__module__ == module.__name__:
            yield value
            yield from _nested_classes(value)


def _expand(item: object) -> Iterator[type]:
    match item:
        case type():
            yield item
        case ModuleType():
            yield from module_classes(item)
        case _:
            raise InvalidInputError(
                TYPES_PARAMETER, f"Expected a class or a module, got {item!r}."
            )


def collect_types(types: TypeSource | None) -> tuple[type, ...]:
    """Collect the classes to select properties from.

    Args:
        types (TypeSource | None): A class, a module whose classes are all collected, or an
            iterable of classes and modules. An empty iterable is valid.

    Raises:
        InvalidInputError: Raised if types is None, is a string, or holds something that is
            neither a class nor a module.

    Returns:
        tuple[type, ...]: The classes, first occurrence order, without duplicates.
    """
    if types is None:
        raise InvalidInputError(TYPES_PARAMETER)
    if isinstance(types, (type, ModuleType)):
        items: Iterable[object] = (types,)
    elif isinstance(types, (str, bytes)) or not isinstance(types, Iterable):
        raise InvalidInputError(
            TYPES_PARAMETER, f"Expected a class, a module or an iterable of them, got {types!r}."
        )
    else:
        items = types

    # dict keeps the first insertion order
    collected = dict.fromkeys(cls for item in items for cls in _expand(item))
    logger.debug("Collected %d class(es) to select properties from", len(collected))
    return tuple(collected)
