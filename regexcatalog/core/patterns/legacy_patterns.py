"""Superseded 21-entry anchored pattern table.

This is the first published revision of the catalog. It differs from
:mod:`~regexcatalog.core.patterns.builtin_patterns` in ways that change match
behavior, so it is kept as a separate table and never merged:

* Most tags are wrapped in ``^...$`` and therefore only match whole strings
  (the IP address rows were never anchored).
* ``USER_NAME`` and ``PASSWORD`` end after a single character class with no
  quantifier, so they only check the first character(s) of the input.
* ``DATE_WITH_SLASH`` expects a literal backslash followed by ``d{1,2}``
  rather than a slash-separated date.
* ``NUMERIC`` accepts the empty string (``*`` rather than ``+``).
* Names ``USER_NAME`` and ``XML`` became ``USER_ID`` and ``XML_FILE``.

Tags are kept exactly as published, with one exception: the hyphen in the
``WEB_URL`` path class is escaped, because ``re`` rejects ``[\\w-.]`` as a bad
character range.

Prefer :func:`regexcatalog.compile_pattern` with ``anchored=True`` over this
table when whole-string matching is wanted.
"""

from __future__ import annotations

_OCTET = r"([1-9]?[0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])"

#: Ordered ``(name, code, tag)`` rows. The code of every row equals its index.
LEGACY_DEFINITIONS: tuple[tuple[str, int, str], ...] = (
    ("EMAIL_ADDRESS",                    0, r"^\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$"),
    ("DOMAIN_NAME",                      1, r"^[a-zA-Z0-9][a-zA-Z0-9-]{1,61}[a-zA-Z0-9]\.[a-zA-Z]{2,}$"),
    ("WEB_URL",                          2, r"^(http|https)://([\w-]+\.)+[\w-]+(/[\w\-./?%&=]*)?$"),
    ("USER_NAME",                        3, r"^[a-zA-Z0-9_\-.]"),
    ("FIXED_LINE_PHONE_JP",              4, r"^0\d\d{4}\d{4}$"),
    ("FIXED_LINE_PHONE_WITH_HYPHEN_JP",  5, r"^0\d-\d{4}-\d{4}$"),
    ("CELL_PHONE_JP",                    6, r"^(070|080|090)\d{4}\d{4}$"),
    ("CELL_PHONE_WITH_HYPHEN_JP",        7, r"^(070|080|090)-\d{4}-\d{4}$"),
    ("PASSWORD",                         8, r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z])."),
    ("DATE",                             9, r"^\d{4}\d{1,2}\d{1,2}$"),
    ("DATE_WITH_HYPHEN",                10, r"^\d{4}-\d{1,2}-\d{1,2}$"),
    ("DATE_WITH_SLASH",                 11, r"^\d{4}\\d{1,2}\\d{1,2}$"),
    ("POST_CODE_JP",                    12, r"^\d{3}-\d{4}$"),
    ("XML",                             13, r"^([a-zA-Z]+-?)+[a-zA-Z0-9]+\.[x|X][m|M][l|L]$"),
    ("IP_ADDRESS",                      14, rf"({_OCTET}\.){{3}}{_OCTET}"),
    ("IP_ADDRESS_WITH_PORT",            15, rf"({_OCTET}\.){{3}}{_OCTET}:([1-9][0-9]{{3}}|[1-9][0-9]{{2}}|[1-9][0-9]{{1}})"),
    ("NUMERIC",                         16, r"^[0-9]*$"),
    ("ALPHANUMERIC_CHARACTER",          17, r"^[A-Za-z0-9]+$"),
    ("ALPHABET",                        18, r"^[A-Za-z]+$"),
    ("ALPHABET_UPPER_CASE",             19, r"^[A-Z]+$"),
    ("ALPHABET_LOWER_CASE",             20, r"^[a-z]+$"),
)
