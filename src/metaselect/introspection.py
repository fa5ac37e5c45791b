"""
Re-export introspection module for cleaner imports.

This allows: from metaselect.introspection import decorated_with
Instead of: from metaselect.meta.introspection.annotations import decorated_with
"""

from .meta.introspection import *  # noqa: F401,F403
from .meta.introspection import __all__  # noqa: F401
