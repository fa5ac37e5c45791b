"""
Re-export selection module for cleaner imports.

This allows: from metaselect.selection import select_properties
Instead of: from metaselect.meta.selection.selector import select_properties
"""

from .meta.selection import *  # noqa: F401,F403
from .meta.selection import __all__  # noqa: F401
