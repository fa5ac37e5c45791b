"""Read-only snapshots of classes and of their declared properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .visibility import Visibility


@dataclass(frozen=True)
class MemberDescriptor:
    """A property as declared by one class.

    Two descriptors are equal when they describe the same declaration, i.e. they have the same
    declaring class and the same name. `annotations` only holds the metadata attached at this
    declaration; metadata of overridden declarations is reached through `overrides`.
    """

    declaring_type: type
    name: str
    return_type: Any = field(default=Any, compare=False)
    visibility: Visibility = field(default=Visibility.PUBLIC, compare=False)
    overrides: MemberDescriptor | None = field(default=None, compare=False, repr=False)
    annotations: tuple[Any, ...] = field(default=(), compare=False)
    is_abstract: bool = field(default=False, compare=False)
    prop: property | None = field(default=None, compare=False, repr=False)

    @property
    def qualified_name(self) -> str:
        """Declaring class qualified name and member name, e.g. 'Order.total'."""
        return f"{self.declaring_type.__qualname__}.{self.name}"

    def override_chain(self) -> list[MemberDescriptor]:
        """This declaration followed by every declaration it overrides, up to the root one."""
        chain: list[MemberDescriptor] = []
        member: MemberDescriptor | None = self
        while member is not None:
            chain.append(member)
            member = member.overrides
        return chain


@dataclass(frozen=True)
class TypeDescriptor:
    """A class, its declared properties in declaration order and its nearest base."""

    type: type
    properties: tuple[MemberDescriptor, ...] = field(default=(), compare=False)
    base: TypeDescriptor | None = field(default=None, compare=False, repr=False)

    @property
    def name(self) -> str:
        return self.type.__qualname__

    @property
    def module(self) -> str:
        return self.type.__module__
