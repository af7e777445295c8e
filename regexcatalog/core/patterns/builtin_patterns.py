"""Canonical built-in regex pattern table.

Thirty-four unanchored patterns covering contact details, Japanese phone and
post codes, dates, network addresses, character classes, Japanese script
ranges and file names. Tags carry no ``^``/``$`` anchors: consumers choose
between ``re.search``, ``re.match`` and ``re.fullmatch`` (or pass
``anchored=True`` to :func:`regexcatalog.compile_pattern`).

**Compatibility contract:** codes are published identifiers. Rows may only be
appended (next code = previous maximum + 1); existing rows are never removed,
renamed or renumbered.

Usage::

    from regexcatalog.core.patterns.builtin_patterns import PatternName
    from regexcatalog import entry_by_name

    entry_by_name(PatternName.POST_CODE_JP).tag
"""

from __future__ import annotations

from enum import Enum


class PatternName(str, Enum):
    """Closed set of canonical pattern names.

    Members compare equal to their plain string value, so either form can be
    passed to the lookup functions.
    """

    EMAIL_ADDRESS = "EMAIL_ADDRESS"
    DOMAIN_NAME = "DOMAIN_NAME"
    WEB_URL = "WEB_URL"
    USER_ID = "USER_ID"
    FIXED_LINE_PHONE_JP = "FIXED_LINE_PHONE_JP"
    FIXED_LINE_PHONE_WITH_HYPHEN_JP = "FIXED_LINE_PHONE_WITH_HYPHEN_JP"
    CELL_PHONE_JP = "CELL_PHONE_JP"
    CELL_PHONE_WITH_HYPHEN_JP = "CELL_PHONE_WITH_HYPHEN_JP"
    PASSWORD = "PASSWORD"
    DATE = "DATE"
    DATE_WITH_HYPHEN = "DATE_WITH_HYPHEN"
    DATE_WITH_SLASH = "DATE_WITH_SLASH"
    POST_CODE_JP = "POST_CODE_JP"
    XML_FILE = "XML_FILE"
    IP_ADDRESS = "IP_ADDRESS"
    IP_ADDRESS_WITH_PORT = "IP_ADDRESS_WITH_PORT"
    NUMERIC = "NUMERIC"
    ALPHANUMERIC_CHARACTER = "ALPHANUMERIC_CHARACTER"
    ALPHABET = "ALPHABET"
    ALPHABET_UPPER_CASE = "ALPHABET_UPPER_CASE"
    ALPHABET_LOWER_CASE = "ALPHABET_LOWER_CASE"
    HIRAGANA = "HIRAGANA"
    KATAKANA = "KATAKANA"
    HALF_WIDTH_KATAKANA = "HALF_WIDTH_KATAKANA"
    KANJI = "KANJI"
    FULL_WIDTH_NUMERIC = "FULL_WIDTH_NUMERIC"
    FULL_WIDTH_ALPHABET = "FULL_WIDTH_ALPHABET"
    FULL_WIDTH_ALPHANUMERIC = "FULL_WIDTH_ALPHANUMERIC"
    TEXT_FILE = "TEXT_FILE"
    CSV_FILE = "CSV_FILE"
    JSON_FILE = "JSON_FILE"
    JAVA_FILE = "JAVA_FILE"
    PROPERTIES_FILE = "PROPERTIES_FILE"
    SQL_FILE = "SQL_FILE"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Raw pattern strings
# ---------------------------------------------------------------------------

_EMAIL_ADDRESS = r"\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*"

# Label of 3-63 characters that neither starts nor ends with a hyphen,
# followed by an alphabetic TLD.
_DOMAIN_NAME = r"[a-zA-Z0-9][a-zA-Z0-9-]{1,61}[a-zA-Z0-9]\.[a-zA-Z]{2,}"

# The hyphen in the path class is escaped: re rejects "\w-." as a range.
_WEB_URL = r"(http|https)://([\w-]+\.)+[\w-]+(/[\w\-./?%&=]*)?"

_USER_ID = r"[a-zA-Z0-9_\-.]{3,15}"

# Japanese phone numbers: 0 + area code (fixed line) or 070/080/090 (mobile).
_FIXED_LINE_PHONE_JP = r"0\d\d{4}\d{4}"
_FIXED_LINE_PHONE_WITH_HYPHEN_JP = r"0\d-\d{4}-\d{4}"
_CELL_PHONE_JP = r"(070|080|090)\d{4}\d{4}"
_CELL_PHONE_WITH_HYPHEN_JP = r"(070|080|090)-\d{4}-\d{4}"

# At least one digit, one lower-case and one upper-case letter; 8+ characters.
_PASSWORD = r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{8,}"

# yyyyMd with optional two-digit month/day.
_DATE = r"\d{4}\d{1,2}\d{1,2}"
_DATE_WITH_HYPHEN = r"\d{4}-\d{1,2}-\d{1,2}"
_DATE_WITH_SLASH = r"\d{4}/\d{1,2}/\d{1,2}"

_POST_CODE_JP = r"\d{3}-\d{4}"

# Published text; "[x|X]" also admits a literal "|".
_XML_FILE = r"([a-zA-Z]+-?)+[a-zA-Z0-9]+\.[x|X][m|M][l|L]"

_OCTET = r"([1-9]?[0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])"
_IP_ADDRESS = rf"({_OCTET}\.){{3}}{_OCTET}"
# Ports 10-9999.
_IP_ADDRESS_WITH_PORT = rf"{_IP_ADDRESS}:([1-9][0-9]{{3}}|[1-9][0-9]{{2}}|[1-9][0-9]{{1}})"

_NUMERIC = r"[0-9]+"
_ALPHANUMERIC_CHARACTER = r"[A-Za-z0-9]+"
_ALPHABET = r"[A-Za-z]+"
_ALPHABET_UPPER_CASE = r"[A-Z]+"
_ALPHABET_LOWER_CASE = r"[a-z]+"

# Japanese scripts. The \uXXXX escapes are resolved by re, so tags stay ASCII.
_HIRAGANA = r"[\u3041-\u309F]+"
_KATAKANA = r"[\u30A1-\u30FF]+"  # includes the middle dot and prolonged sound mark
_HALF_WIDTH_KATAKANA = r"[\uFF66-\uFF9F]+"
_KANJI = r"[\u4E00-\u9FFF]+"  # CJK Unified Ideographs
_FULL_WIDTH_NUMERIC = r"[\uFF10-\uFF19]+"
_FULL_WIDTH_ALPHABET = r"[\uFF21-\uFF3A\uFF41-\uFF5A]+"
_FULL_WIDTH_ALPHANUMERIC = r"[\uFF10-\uFF19\uFF21-\uFF3A\uFF41-\uFF5A]+"

# File names: hyphen-joined alphabetic words, then the extension in any case.
_FILE_STEM = r"([a-zA-Z]+-?)+[a-zA-Z0-9]+"
_TEXT_FILE = _FILE_STEM + r"\.[tT][xX][tT]"
_CSV_FILE = _FILE_STEM + r"\.[cC][sS][vV]"
_JSON_FILE = _FILE_STEM + r"\.[jJ][sS][oO][nN]"
_JAVA_FILE = _FILE_STEM + r"\.[jJ][aA][vV][aA]"
_PROPERTIES_FILE = _FILE_STEM + r"\.[pP][rR][oO][pP][eE][rR][tT][iI][eE][sS]"
_SQL_FILE = _FILE_STEM + r"\.[sS][qQ][lL]"

# ---------------------------------------------------------------------------
# Definition table
# ---------------------------------------------------------------------------

#: Ordered ``(name, code, tag)`` rows. The code of every row equals its index.
BUILTIN_DEFINITIONS: tuple[tuple[str, int, str], ...] = (
    (PatternName.EMAIL_ADDRESS.value,                    0, _EMAIL_ADDRESS),
    (PatternName.DOMAIN_NAME.value,                      1, _DOMAIN_NAME),
    (PatternName.WEB_URL.value,                          2, _WEB_URL),
    (PatternName.USER_ID.value,                          3, _USER_ID),
    (PatternName.FIXED_LINE_PHONE_JP.value,              4, _FIXED_LINE_PHONE_JP),
    (PatternName.FIXED_LINE_PHONE_WITH_HYPHEN_JP.value,  5, _FIXED_LINE_PHONE_WITH_HYPHEN_JP),
    (PatternName.CELL_PHONE_JP.value,                    6, _CELL_PHONE_JP),
    (PatternName.CELL_PHONE_WITH_HYPHEN_JP.value,        7, _CELL_PHONE_WITH_HYPHEN_JP),
    (PatternName.PASSWORD.value,                         8, _PASSWORD),
    (PatternName.DATE.value,                             9, _DATE),
    (PatternName.DATE_WITH_HYPHEN.value,                10, _DATE_WITH_HYPHEN),
    (PatternName.DATE_WITH_SLASH.value,                 11, _DATE_WITH_SLASH),
    (PatternName.POST_CODE_JP.value,                    12, _POST_CODE_JP),
    (PatternName.XML_FILE.value,                        13, _XML_FILE),
    (PatternName.IP_ADDRESS.value,                      14, _IP_ADDRESS),
    (PatternName.IP_ADDRESS_WITH_PORT.value,            15, _IP_ADDRESS_WITH_PORT),
    (PatternName.NUMERIC.value,                         16, _NUMERIC),
    (PatternName.ALPHANUMERIC_CHARACTER.value,          17, _ALPHANUMERIC_CHARACTER),
    (PatternName.ALPHABET.value,                        18, _ALPHABET),
    (PatternName.ALPHABET_UPPER_CASE.value,             19, _ALPHABET_UPPER_CASE),
    (PatternName.ALPHABET_LOWER_CASE.value,             20, _ALPHABET_LOWER_CASE),
    (PatternName.HIRAGANA.value,                        21, _HIRAGANA),
    (PatternName.KATAKANA.value,                        22, _KATAKANA),
    (PatternName.HALF_WIDTH_KATAKANA.value,             23, _HALF_WIDTH_KATAKANA),
    (PatternName.KANJI.value,                           24, _KANJI),
    (PatternName.FULL_WIDTH_NUMERIC.value,              25, _FULL_WIDTH_NUMERIC),
    (PatternName.FULL_WIDTH_ALPHABET.value,             26, _FULL_WIDTH_ALPHABET),
    (PatternName.FULL_WIDTH_ALPHANUMERIC.value,         27, _FULL_WIDTH_ALPHANUMERIC),
    (PatternName.TEXT_FILE.value,                       28, _TEXT_FILE),
    (PatternName.CSV_FILE.value,                        29, _CSV_FILE),
    (PatternName.JSON_FILE.value,                       30, _JSON_FILE),
    (PatternName.JAVA_FILE.value,                       31, _JAVA_FILE),
    (PatternName.PROPERTIES_FILE.value,                 32, _PROPERTIES_FILE),
    (PatternName.SQL_FILE.value,                        33, _SQL_FILE),
)
