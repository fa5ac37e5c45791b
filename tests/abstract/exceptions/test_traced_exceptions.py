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
Description: Tests for the traced exceptions and the selection errors.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import pytest

from metaselect.exceptions import (
    IntrospectionError,
    InvalidInputError,
    NullSelectorError,
    ParameterError,
    TracedException,
    format_exception,
)


class TestFormatException:
    """Test cases for the format_exception function."""

    def test_format_exception_with_simple_exception(self):
        """Test formatting a simple exception with traceback."""
        try:
            raise ValueError("Test error message")
        except ValueError as e:
            result = format_exception(e)

            assert "ValueError: Test error message" in result
            assert "Traceback" in result
            assert "test_format_exception_with_simple_exception" in result

    def test_format_exception_with_no_traceback(self):
        """Test formatting an exception that has no traceback."""
        result = format_exception(ValueError("No traceback"))

        assert "ValueError: No traceback" in result
        assert "Traceback" not in result

    def test_format_exception_with_chained_exception(self):
        """Test that the cause of an exception is formatted too."""
        try:
            try:
                raise KeyError("inner")
            except KeyError as inner:
                raise TracedException("outer") from inner
        except TracedException as e:
            result = e.traceback_format()

            assert "KeyError: 'inner'" in result
            assert "TracedException: outer" in result


class TestParameterError:
    """Test cases for ParameterError and its subclasses."""

    def test_default_message(self):
        """Test the message of a missing parameter."""
        error = ParameterError("types")

        assert error.param_name == "types"
        assert error.message == "Value cannot be None."
        assert str(error) == "Value cannot be None. (Parameter 'types')"

    def test_custom_message(self):
        """Test a custom message."""
        error = ParameterError("selector", "Expected a selector.")

        assert str(error) == "Expected a selector. (Parameter 'selector')"

    @pytest.mark.parametrize("error_type", [InvalidInputError, NullSelectorError])
    def test_selection_errors_are_traced(self, error_type):
        """Test that selection errors are traced parameter errors."""
        with pytest.raises(ParameterError) as exc_info:
            raise error_type("types")

        assert isinstance(exc_info.value, TracedException)
        assert exc_info.value.param_name == "types"
        assert "Parameter 'types'" in exc_info.value.traceback_format()

    def test_introspection_error_is_traced(self):
        """Test that introspection errors are traced exceptions."""
        assert issubclass(IntrospectionError, TracedException)
        assert not issubclass(IntrospectionError, ParameterError)
