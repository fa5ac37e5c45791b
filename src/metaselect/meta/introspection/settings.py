"""Fixed settings of the introspection layer."""

from ..classes.constants import ConstantNamespace


class IntrospectionSettings(ConstantNamespace):
    """Names and defaults shared by the introspection helpers."""

    # property attributes holding the accessors, in the order they are inspected
    ACCESSOR_ATTRIBUTES: tuple[str, ...] = ("fget", "fset", "fdel")
    # attribute set on accessors by the public/internal/protected/private decorators
    VISIBILITY_ATTRIBUTE: str = "__metaselect_visibility__"
    # attribute holding the annotations attached to an accessor by decorated_with
    ANNOTATIONS_ATTRIBUTE: str = "__metaselect_annotations__"
    # inheritance flag of annotation classes that neither declare nor register one
    DEFAULT_INHERITED: bool = True
