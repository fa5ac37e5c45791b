"""Tests for the collection of the classes to select properties from."""

from types import ModuleType

import pytest

from metaselect.selection import InvalidInputError, collect_types, module_classes


class Alpha:
    pass


class Beta:
    pass


def make_module(name: str = "metaselect_collected_module") -> ModuleType:
    module = ModuleType(name)

    class First:
        class Inner:
            class Deepest:
                pass

    class Second:
        pass

    for cls in (First, First.Inner, First.Inner.Deepest, Second):
        cls.__module__ = name
    module.First = First
    module.Second = Second
    module.Alias = First
    module.Foreign = Beta
    module.value = 3
    return module


class TestCollectTypes:
    """Test collect_types."""

    def test_single_class(self):
        """Test that a class is collected alone."""
        assert collect_types(Alpha) == (Alpha,)

    def test_list_keeps_order_and_removes_duplicates(self):
        """Test that the first occurrence of a class wins."""
        assert collect_types([Beta, Alpha, Beta, Alpha]) == (Beta, Alpha)

    def test_any_iterable(self):
        """Test that tuples and generators are accepted."""
        assert collect_types((Alpha, Beta)) == (Alpha, Beta)
        assert collect_types(c for c in (Beta,)) == (Beta,)

    def test_empty(self):
        """Test that an empty list is valid."""
        assert collect_types([]) == ()

    def test_none(self):
        """Test that None is rejected with the parameter name."""
        with pytest.raises(InvalidInputError) as exc_info:
            collect_types(None)
        assert exc_info.value.param_name == "types"
        assert str(exc_info.value) == "Value cannot be None. (Parameter 'types')"

    @pytest.mark.parametrize("value", ["Alpha", b"Alpha", 1, [Alpha, "Beta"], [None]])
    def test_invalid(self, value):
        """Test that values that are neither classes nor modules are rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            collect_types(value)
        assert exc_info.value.param_name == "types"

    def test_module(self):
        """Test that a module contributes its own classes, nested ones included."""
        module = make_module()
        assert collect_types(module) == (
            module.First,
            module.First.Inner,
            module.First.Inner.Deepest,
            module.Second,
        )

    def test_module_and_classes(self):
        """Test that modules and classes can be mixed and collapse by identity."""
        module = make_module()
        assert collect_types([module.Second, module, Alpha]) == (
            module.Second,
            module.First,
            module.First.Inner,
            module.First.Inner.Deepest,
            Alpha,
        )


class TestModuleClasses:
    """Test module_classes."""

    def test_nested_classes_are_recursive(self):
        """Test that nested classes are found at any depth, aliases are listed as found."""
        module = make_module()
        assert list(module_classes(module)) == [
            module.First,
            module.First.Inner,
            module.First.Inner.Deepest,
            module.Second,
            module.First,
            module.First.Inner,
            module.First.Inner.Deepest,
        ]

    def test_foreign_classes_are_skipped(self):
        """Test that classes defined elsewhere are not listed."""
        module = ModuleType("metaselect_foreign_module")
        module.Alpha = Alpha
        assert not list(module_classes(module))
