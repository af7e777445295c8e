"""regexcatalog: a fixed catalog of named regular-expression patterns.

Public re-exports. Import from this module to avoid coupling to the internal
module layout::

    from regexcatalog import PatternName, entry_by_name, UnknownPatternError
"""

from regexcatalog.core.catalog import (
    Catalog,
    CatalogEntry,
    CatalogError,
    InvalidPatternDefinitionError,
    UnknownPatternError,
    validate_catalog,
)
from regexcatalog.core.patterns import PatternName
from regexcatalog.core.registry import (
    all_entries,
    compile_pattern,
    entry_by_code,
    entry_by_name,
    get_catalog,
    get_legacy_catalog,
    tag_of,
)

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CatalogError",
    "InvalidPatternDefinitionError",
    "PatternName",
    "UnknownPatternError",
    "all_entries",
    "compile_pattern",
    "entry_by_code",
    "entry_by_name",
    "get_catalog",
    "get_legacy_catalog",
    "tag_of",
    "validate_catalog",
]
