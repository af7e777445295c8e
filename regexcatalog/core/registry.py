"""Process-wide catalog singletons and module-level accessors.

The canonical catalog is built lazily on first use and cached for the life of
the process with ``functools.lru_cache``, the same way settings are cached.
Every accessor here delegates to that single instance, so callers never hold
or mutate catalog state themselves.

Usage::

    from regexcatalog import entry_by_code, tag_of, compile_pattern

    entry_by_code(12).name                          # 'POST_CODE_JP'
    tag_of("NUMERIC")                               # '[0-9]+'
    compile_pattern("NUMERIC", anchored=True).match("123")
"""

from __future__ import annotations

import functools
import logging
import re
from typing import Union

from regexcatalog.config import get_settings
from regexcatalog.core.catalog import Catalog, CatalogEntry, EntryKey
from regexcatalog.core.patterns.builtin_patterns import BUILTIN_DEFINITIONS
from regexcatalog.core.patterns.legacy_patterns import LEGACY_DEFINITIONS

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the canonical catalog, building it on first call.

    Raises:
        InvalidPatternDefinitionError: If the shipped table is defective.
            Nothing is cached in that case, so the error repeats on every call.
    """
    return Catalog(BUILTIN_DEFINITIONS)


@functools.lru_cache(maxsize=1)
def _build_legacy_catalog() -> Catalog:
    return Catalog(LEGACY_DEFINITIONS)


def get_legacy_catalog() -> Catalog:
    """Return the superseded 21-entry anchored catalog.

    Its tags match whole strings only and several differ in meaning from the
    canonical table (see :mod:`~regexcatalog.core.patterns.legacy_patterns`).
    A warning is logged on every call unless ``legacy_warning`` is disabled.
    """
    if get_settings().legacy_warning:
        logger.warning(
            "Legacy anchored regex catalog requested; its ^...$ anchoring and "
            "names differ from the canonical catalog"
        )
    return _build_legacy_catalog()


# ---------------------------------------------------------------------------
# Accessors over the canonical catalog
# ---------------------------------------------------------------------------


def entry_by_name(name: str) -> CatalogEntry:
    return get_catalog().entry_by_name(name)


def entry_by_code(code: int) -> CatalogEntry:
    return get_catalog().entry_by_code(code)


def tag_of(key: EntryKey) -> str:
    """Return the tag for an entry, a name, or a code."""
    return get_catalog().tag_of(key)


def all_entries() -> tuple[CatalogEntry, ...]:
    """Return every canonical entry in ascending code order."""
    return get_catalog().all_entries()


# ---------------------------------------------------------------------------
# Compilation helper
# ---------------------------------------------------------------------------


def _compile(tag: str, flags: int, anchored: bool) -> re.Pattern[str]:
    if anchored:
        tag = f"^(?:{tag})$"
    return re.compile(tag, flags)


# Keyed on the size so a settings reload swaps in a memo of the new size.
@functools.lru_cache(maxsize=1)
def _get_compiler(size: int):
    return functools.lru_cache(maxsize=size)(_compile)


def compile_pattern(
    key: EntryKey,
    flags: Union[int, re.RegexFlag] = 0,
    *,
    anchored: bool = False,
) -> re.Pattern[str]:
    """Compile the tag resolved from *key* and memoize the result.

    Args:
        key: A :class:`CatalogEntry` (from any catalog), or a name or code in
            the canonical catalog.
        flags: Flags passed through to :func:`re.compile`.
        anchored: Wrap the tag as ``^(?:tag)$`` so ``match``/``search`` only
            succeed on the whole string. The canonical tags are unanchored;
            this restores the whole-string behavior of the legacy table
            without touching the catalog.

    The memo holds at most ``compile_cache_size`` patterns. Reloading settings
    with a different size starts a fresh memo.

    Raises:
        UnknownPatternError: If *key* does not resolve.
    """
    entry = get_catalog().resolve(key)
    compiler = _get_compiler(get_settings().compile_cache_size)
    return compiler(entry.tag, int(flags), anchored)
