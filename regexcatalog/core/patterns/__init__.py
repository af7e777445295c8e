"""Regex pattern definition tables.

Provides the canonical built-in table and the superseded anchored table.
"""

from regexcatalog.core.patterns.builtin_patterns import (
    BUILTIN_DEFINITIONS,
    PatternName,
)
from regexcatalog.core.patterns.legacy_patterns import LEGACY_DEFINITIONS

__all__ = [
    "BUILTIN_DEFINITIONS",
    "LEGACY_DEFINITIONS",
    "PatternName",
]
