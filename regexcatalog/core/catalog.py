"""Immutable regex pattern catalog.

A :class:`Catalog` is an ordered, read-only table of :class:`CatalogEntry`
records. Each entry pairs a stable integer ``code`` with a symbolic ``name``
and a ``tag``, the regular-expression source text handed to :mod:`re` by
consumers. The catalog never evaluates patterns itself beyond the optional
construction-time self-check.

Codes are dense and zero-based in declaration order, so lookup by code is a
tuple index and lookup by name is a single dict read.

Usage::

    from regexcatalog.core.catalog import Catalog

    catalog = Catalog([("ZIP", 0, r"\\d{5}"), ("WORD", 1, r"\\w+")])
    catalog.entry_by_code(0).name     # 'ZIP'
    catalog.tag_of("WORD")            # the raw text \\w+
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Union

from regexcatalog.config import get_settings

logger = logging.getLogger(__name__)

#: A raw table row: ``(name, code, tag)``.
Definition = tuple[str, int, str]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CatalogError(Exception):
    """Base class for all catalog errors."""


class UnknownPatternError(CatalogError, LookupError):
    """Raised when a lookup by name or code resolves to no catalog entry.

    Lookups are total over the fixed key space, so this is always a caller
    problem and always recoverable (fall back, log, or re-prompt).

    Attributes:
        key: The name, code, or other value that failed to resolve.
    """

    def __init__(self, key: object) -> None:
        self.key = key
        if isinstance(key, str):
            message = f"No catalog entry named {key!r}"
        elif isinstance(key, int) and not isinstance(key, bool):
            message = f"No catalog entry with code {key}"
        else:
            message = f"Cannot resolve catalog entry from {type(key).__name__} {key!r}"
        super().__init__(message)


class InvalidPatternDefinitionError(CatalogError):
    """Raised while building a catalog whose definition table is defective.

    Covers non-contiguous or duplicate codes, duplicate or empty names,
    empty tags, and tags that fail to compile. This indicates a defect in the
    shipped table rather than bad runtime input and should be treated as fatal.

    Attributes:
        name: Name of the offending entry, when known.
        code: Code of the offending entry, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        name: Optional[str] = None,
        code: Optional[int] = None,
    ) -> None:
        self.name = name
        self.code = code
        super().__init__(message)


# ---------------------------------------------------------------------------
# CatalogEntry dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CatalogEntry:
    """An immutable catalog entry.

    Attributes:
        code: Stable, dense, zero-based identifier. Never reassigned once
            published; consumers may persist it.
        name: Symbolic identifier (e.g. ``"EMAIL_ADDRESS"``), unique within
            its catalog.
        tag: Regular-expression source text, stored unparsed.
    """

    code: int
    name: str
    tag: str


EntryKey = Union[CatalogEntry, str, int]


def _plain_name(name: str) -> str:
    return name.value if isinstance(name, Enum) else name


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class Catalog:
    """Ordered, immutable table of :class:`CatalogEntry` records.

    Args:
        definitions: ``(name, code, tag)`` rows in declaration order. The
            code of each row must equal its position.
        self_check: Compile every tag after the table is validated. ``None``
            (the default) defers to the ``self_check`` setting.

    Raises:
        InvalidPatternDefinitionError: If any row breaks the table invariants
            or, with the self-check enabled, any tag fails to compile.
    """

    def __init__(
        self,
        definitions: Iterable[Definition],
        *,
        self_check: Optional[bool] = None,
    ) -> None:
        entries: list[CatalogEntry] = []
        by_name: dict[str, CatalogEntry] = {}

        for position, row in enumerate(definitions):
            try:
                name, code, tag = row
            except (TypeError, ValueError) as exc:
                raise InvalidPatternDefinitionError(
                    f"Row {position} is not a (name, code, tag) triple: {row!r}"
                ) from exc
            if isinstance(code, bool) or not isinstance(code, int) or code != position:
                raise InvalidPatternDefinitionError(
                    f"Entry {name!r} declares code {code!r} at position {position}; "
                    "codes must be contiguous from 0 in declaration order",
                    name=name,
                    code=code if isinstance(code, int) else None,
                )
            if not isinstance(name, str) or not name:
                raise InvalidPatternDefinitionError(
                    f"Entry with code {code} has an empty or non-string name",
                    code=code,
                )
            # str-valued enum members are stored under their plain value.
            name = _plain_name(name)
            if name in by_name:
                raise InvalidPatternDefinitionError(
                    f"Duplicate entry name {name!r} (codes {by_name[name].code} and {code})",
                    name=name,
                    code=code,
                )
            if not isinstance(tag, str) or not tag:
                raise InvalidPatternDefinitionError(
                    f"Entry {name!r} has an empty or non-string tag",
                    name=name,
                    code=code,
                )

            entry = CatalogEntry(code=code, name=name, tag=tag)
            entries.append(entry)
            by_name[name] = entry

        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._by_name = MappingProxyType(by_name)

        if self_check is None:
            self_check = get_settings().self_check
        if self_check:
            validate_catalog(self)

        logger.debug(
            "Built regex catalog with %d entries (self_check=%s)",
            len(self._entries),
            self_check,
        )

    # -- lookups -----------------------------------------------------------

    def entry_by_name(self, name: str) -> CatalogEntry:
        """Return the entry named *name* (a ``str`` or str-valued enum member)."""
        if not isinstance(name, str):
            raise UnknownPatternError(name)
        key = _plain_name(name)
        try:
            return self._by_name[key]
        except KeyError:
            raise UnknownPatternError(key) from None

    def entry_by_code(self, code: int) -> CatalogEntry:
        """Return the entry whose code is *code*.

        Raises:
            UnknownPatternError: For negative codes, codes past the last
                entry, and anything that is not a plain ``int``.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownPatternError(code)
        if 0 <= code < len(self._entries):
            return self._entries[code]
        raise UnknownPatternError(code)

    def resolve(self, key: EntryKey) -> CatalogEntry:
        """Resolve an entry, a name, or a code to a :class:`CatalogEntry`.

        Entries are returned unchanged, so an entry taken from another
        catalog resolves to itself.
        """
        if isinstance(key, CatalogEntry):
            return key
        if isinstance(key, str):
            return self.entry_by_name(key)
        return self.entry_by_code(key)

    def tag_of(self, key: EntryKey) -> str:
        """Return the tag of the entry resolved from *key*."""
        return self.resolve(key).tag

    def all_entries(self) -> tuple[CatalogEntry, ...]:
        """Return every entry in ascending code order."""
        return self._entries

    def names(self) -> tuple[str, ...]:
        """Return every entry name in ascending code order."""
        return tuple(entry.name for entry in self._entries)

    # -- container protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._entries)} entries)"


# ---------------------------------------------------------------------------
# Self-check
# ---------------------------------------------------------------------------


def validate_catalog(catalog: Catalog) -> None:
    """Compile every tag in *catalog* and fail on the first one ``re`` rejects.

    Raises:
        InvalidPatternDefinitionError: Naming the failing entry, chained from
            the underlying :class:`re.error`.
    """
    for entry in catalog:
        try:
            re.compile(entry.tag)
        except re.error as exc:
            logger.error(
                "Catalog entry %r (code %d) has invalid regex %r: %s",
                entry.name,
                entry.code,
                entry.tag,
                exc,
            )
            raise InvalidPatternDefinitionError(
                f"Entry {entry.name!r} (code {entry.code}) does not compile: {exc}",
                name=entry.name,
                code=entry.code,
            ) from exc
