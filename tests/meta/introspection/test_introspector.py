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
Description: Tests for the Introspector, the descriptors and the metadata decorators.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import abc
from typing import Any, Optional

import pytest

from metaselect.introspection import (
    Annotation,
    IntrospectionError,
    Introspector,
    MemberDescriptor,
    Visibility,
    attached_annotations,
    decorated_with,
    introspector,
    protected,
)


class Tag(Annotation):
    """Test"""


class Secret(Annotation, inherited=False):
    """Test"""


class Account:
    @property
    @decorated_with(Tag("id"))
    def identifier(self) -> int:
        return 1

    @property
    def owner(self) -> Optional[str]:
        return None

    @owner.setter
    @decorated_with(Secret())
    def owner(self, value: Optional[str]) -> None:
        pass

    @property
    def untyped(self):
        return None

    @property
    def forward(self) -> "UnknownType":  # noqa: F821
        return None

    def method(self) -> int:
        return 0

    attribute: int = 0


class SavingsAccount(Account):
    @property
    @protected
    def identifier(self) -> int:
        return 2

    @property
    def rate(self) -> float:
        return 0.1


class Left:
    @property
    def side(self) -> str:
        return "left"


class Right:
    @property
    def side(self) -> str:
        return "right"


class Both(Right, Left):
    @property
    def side(self) -> str:
        return "both"


@pytest.fixture(name="registry")
def fixture_registry() -> Introspector:
    return Introspector()


# =============================================================================
# Describe Tests
# =============================================================================


class TestDescribe:
    """Test building descriptors."""

    def test_declared_properties_only(self, registry):
        """Test that only properties are listed, methods and attributes are not."""
        names = [m.name for m in registry.list_declared_properties(Account)]
        assert names == ["identifier", "owner", "untyped", "forward"]

    def test_return_types(self, registry):
        """Test that return types come from the getter annotations."""
        members = {m.name: m for m in registry.list_declared_properties(Account)}
        assert members["identifier"].return_type is int
        assert members["owner"].return_type == Optional[str]
        assert members["untyped"].return_type is Any
        assert members["forward"].return_type == "UnknownType"

    def test_annotations_from_every_accessor(self, registry):
        """Test that metadata attached to the setter belongs to the property."""
        members = {m.name: m for m in registry.list_declared_properties(Account)}
        assert [type(a) for a in members["identifier"].annotations] == [Tag]
        assert [type(a) for a in members["owner"].annotations] == [Secret]
        assert registry.explicit_annotations(members["untyped"]) == ()

    def test_override_links(self, registry):
        """Test that overriding properties point to the overridden declaration."""
        identifier, rate = registry.list_declared_properties(SavingsAccount)
        assert identifier.overrides == registry.list_declared_properties(Account)[0]
        assert identifier.overrides.declaring_type is Account
        assert rate.overrides is None

    def test_override_does_not_copy_annotations(self, registry):
        """Test that an override only holds its own metadata."""
        identifier = registry.list_declared_properties(SavingsAccount)[0]
        assert identifier.annotations == ()
        assert identifier.visibility is Visibility.PROTECTED

    def test_override_follows_mro(self, registry):
        """Test that the nearest declaration in the method resolution order is overridden."""
        side = registry.list_declared_properties(Both)[0]
        assert side.overrides.declaring_type is Right
        assert side.overrides.overrides is None

    def test_base_type(self, registry):
        """Test the base type chain."""
        assert registry.base_type(SavingsAccount).type is Account
        assert registry.base_type(Account) is None
        assert registry.base_type(Both).type is Right

    def test_type_descriptor_identity(self, registry):
        """Test the name and module of a type descriptor."""
        descriptor = registry.describe(Account)
        assert descriptor.name == "Account"
        assert descriptor.module == __name__

    def test_abstract_properties(self, registry):
        """Test that abstract getters make abstract properties."""

        class Base(abc.ABC):
            @property
            @abc.abstractmethod
            def size(self) -> int: ...

        assert registry.list_declared_properties(Base)[0].is_abstract
        assert not registry.list_declared_properties(Account)[0].is_abstract

    def test_describe_is_cached(self, registry):
        """Test that descriptors are built once until the cache is cleared."""
        first = registry.describe(Account)
        assert registry.describe(Account) is first
        registry.clear_cache()
        assert registry.describe(Account) is not first
        assert registry.describe(Account) == first

    def test_describe_rejects_non_classes(self, registry):
        """Test that only classes can be described."""
        with pytest.raises(IntrospectionError):
            registry.describe(Account())

    def test_default_introspector_is_shared(self):
        """Test that the default introspector is a singleton."""
        assert introspector() is introspector()


# =============================================================================
# Descriptor Tests
# =============================================================================


class TestMemberDescriptor:
    """Test MemberDescriptor helpers."""

    def test_identity(self):
        """Test that descriptors compare by declaring class and name only."""
        first = MemberDescriptor(Account, "owner", return_type=int)
        second = MemberDescriptor(Account, "owner", return_type=str)
        assert first == second
        assert hash(first) == hash(second)
        assert first != MemberDescriptor(SavingsAccount, "owner")

    def test_qualified_name(self, registry):
        """Test the qualified name of a member."""
        assert registry.list_declared_properties(SavingsAccount)[1].qualified_name == (
            "SavingsAccount.rate"
        )

    def test_descriptors_are_frozen(self, registry):
        """Test that descriptors cannot be modified."""
        member = registry.list_declared_properties(Account)[0]
        with pytest.raises(AttributeError):
            member.name = "other"


# =============================================================================
# Annotation Tests
# =============================================================================


class TestAnnotations:
    """Test the metadata helpers."""

    def test_inheritance_flags(self, registry):
        """Test the declared, default and registered inheritance flags."""
        assert registry.annotation_inheritance_flag(Tag) is True
        assert registry.annotation_inheritance_flag(Secret) is False
        assert registry.annotation_inheritance_flag(int) is True
        registry.register_annotation_type(int, inherited=False)
        assert registry.annotation_inheritance_flag(int) is False

    def test_flag_inherited_by_annotation_subclasses(self):
        """Test that annotation subclasses keep the flag of their base."""

        class MoreSecret(Secret):
            """Test"""

        assert MoreSecret.__inherited__ is False

    def test_register_rejects_non_classes(self, registry):
        """Test that only classes can be registered."""
        with pytest.raises(IntrospectionError):
            registry.register_annotation_type(Tag(), inherited=True)

    def test_decorating_a_property_object(self):
        """Test decorating above @property and stacking decorators."""

        class Subject:
            @decorated_with(Tag("outer"))
            @property
            @decorated_with(Tag("first"), Tag("second"))
            @decorated_with(Tag("third"))
            def value(self) -> int:
                return 0

        values = [a.value for a in attached_annotations(vars(Subject)["value"])]
        assert values == ["outer", "first", "second", "third"]

    def test_extended_property_does_not_own_base_accessors(self, registry):
        """Test that a property extended with @Base.x.setter only owns its new accessors."""

        class Base:
            @property
            @decorated_with(Secret())
            def value(self) -> int:
                return 0

        class Extended(Base):
            @Base.value.setter
            @decorated_with(Tag("setter"))
            def value(self, value: int) -> None:
                pass

        (member,) = registry.list_declared_properties(Extended)
        assert member.overrides == registry.list_declared_properties(Base)[0]
        assert [a.value for a in registry.explicit_annotations(member)] == ["setter"]
        assert [type(a) for a in attached_annotations(vars(Extended)["value"])] == [Secret, Tag]

    def test_decorating_something_else_raises(self):
        """Test that only accessors and properties can be decorated."""
        with pytest.raises(IntrospectionError):
            decorated_with(Tag())(3)
        with pytest.raises(IntrospectionError):
            decorated_with(Tag())(property())

    def test_annotation_repr(self):
        """Test the representation of annotations."""
        assert repr(Tag()) == "Tag()"
        assert repr(Tag("id")) == "Tag('id')"
