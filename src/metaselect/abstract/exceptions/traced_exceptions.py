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
Description: Base exceptions carrying their traceback as a string and, for argument
            errors, the name of the offending parameter.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"


import traceback


def format_exception(e: BaseException) -> str:
    """Format the provided exception to a string with its traceback.

    Args:
        e (BaseException): The exception to format.

    Returns:
        str: The string representation of the exception with its traceback.
    """
    return "".join(traceback.format_exception(type(e), e, e.__traceback__))


class TracedException(Exception):
    """Base traceable exception class."""

    def traceback_format(self) -> str:
        """Format the exception to a string with its traceback.

        Returns:
            str: The string representation of the exception with its traceback.
        """
        return format_exception(self)


class ParameterError(TracedException):
    """Traceable exception raised because of the value given to a named parameter.

    Examples:
        >>> str(ParameterError("types", "Value cannot be None."))
        "Value cannot be None. (Parameter 'types')"
    """

    def __init__(self, param_name: str, message: str = "Value cannot be None.") -> None:
        self.param_name = param_name
        self.message = message
        super().__init__(f"{message} (Parameter '{param_name}')")
