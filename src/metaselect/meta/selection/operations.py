"""Free function counterparts of the PropertySelector operations.

They take the selector as first argument and fail with NullSelectorError instead of an
AttributeError when it is missing, which keeps pipelines built from optional selectors honest.
"""

from typing import Any

from .errors import NullSelectorError
from .selector import PropertySelector
from ..introspection.descriptors import MemberDescriptor

SELECTOR_PARAMETER = "selector"


def _require(selector: PropertySelector | None) -> PropertySelector:
    if selector is None:
        raise NullSelectorError(SELECTOR_PARAMETER)
    if not isinstance(selector, PropertySelector):
        raise NullSelectorError(
            SELECTOR_PARAMETER, f"Expected a PropertySelector, got {selector!r}."
        )
    return selector


def that_are_public_or_internal(selector: PropertySelector | None) -> PropertySelector:
    return _require(selector).that_are_public_or_internal


def that_are_not_public_or_internal(selector: PropertySelector | None) -> PropertySelector:
    return _require(selector).that_are_not_public_or_internal


def that_are_abstract(selector: PropertySelector | None) -> PropertySelector:
    return _require(selector).that_are_abstract


def that_are_not_abstract(selector: PropertySelector | None) -> PropertySelector:
    return _require(selector).that_are_not_abstract


def of_type(selector: PropertySelector | None, return_type: Any) -> PropertySelector:
    return _require(selector).of_type(return_type)


def not_of_type(selector: PropertySelector | None, return_type: Any) -> PropertySelector:
    return _require(selector).not_of_type(return_type)


def that_are_decorated_with(
    selector: PropertySelector | None, annotation_type: type
) -> PropertySelector:
    return _require(selector).that_are_decorated_with(annotation_type)


def that_are_not_decorated_with(
    selector: PropertySelector | None, annotation_type: type
) -> PropertySelector:
    return _require(selector).that_are_not_decorated_with(annotation_type)


def that_are_decorated_with_or_inherit(
    selector: PropertySelector | None, annotation_type: type
) -> PropertySelector:
    return _require(selector).that_are_decorated_with_or_inherit(annotation_type)


def that_are_not_decorated_with_or_inherit(
    selector: PropertySelector | None, annotation_type: type
) -> PropertySelector:
    return _require(selector).that_are_not_decorated_with_or_inherit(annotation_type)


def to_sequence(selector: PropertySelector | None) -> tuple[MemberDescriptor, ...]:
    return _require(selector).to_sequence()


def return_types(selector: PropertySelector | None) -> tuple[Any, ...]:
    return _require(selector).return_types()
