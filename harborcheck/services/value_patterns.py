"""
Value Pattern Matchers

One predicate per identifier whose values have a recognisable shape. Each
predicate takes a single cell and returns True when the cell looks like that
identifier. Anything that is not a non-blank string is a non-match.

Address, telephone, certificate and device identifiers have no predicate
here: their values cannot be told apart from free text.
"""

import ipaddress
import re
from typing import Any, Optional


# ============================================================================
# PATTERNS
# ============================================================================

# 12345 or 12345-6789
ZIP_PATTERN = re.compile(r'^\d{5}(-\d{4})?$')

EMAIL_PATTERN = re.compile(
    r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]+$'
)

# 123-45-6789 or 123456789
SSN_PATTERN = re.compile(r'^(\d{3}-\d{2}-\d{4}|\d{9})$')

# Country code, check digits, then the BBAN (ISO 13616), spaces removed
IBAN_PATTERN = re.compile(r'^[A-Z]{2}\d{2}[A-Z0-9]{11,30}$')

# 17 characters, I, O and Q are never used
VIN_PATTERN = re.compile(r'^[A-HJ-NPR-Z0-9]{17}$')

URL_PATTERN = re.compile(r'^(https?|ftp)://[^\s/$.?#][^\s]*$', re.IGNORECASE)

_NAME_TOKEN = r"(?:[A-Z]')?(?:[A-Z][a-z]+)+(?:-(?:[A-Z][a-z]+)+)*"
NAME_PATTERN = re.compile(rf"^{_NAME_TOKEN}(?: {_NAME_TOKEN}){{0,3}}$")

_MONTH = (
    r'(jan(uary)?|feb(ruary)?|mar(ch)?|apr(il)?|may|june?|july?|aug(ust)?'
    r'|sep(t(ember)?)?|oct(ober)?|nov(ember)?|dec(ember)?)\.?'
)

# Numeric dates: (first, second, year) groups; first/second are day and month in either order
NUMERIC_DATE_PATTERN = re.compile(r'^(\d{1,2})([-/.])(\d{1,2})\2(\d{4}|\d{2})$')
# ISO-style: year first, optionally followed by a time of day
ISO_DATE_PATTERN = re.compile(
    r'^(\d{4})([-/.])(\d{1,2})\2(\d{1,2})([ T]\d{1,2}:\d{2}(:\d{2}(\.\d+)?)?)?$'
)

TEXTUAL_DATE_PATTERNS = [
    # 12 March 2020, 12 Mar. 2020
    re.compile(rf'^\d{{1,2}}(st|nd|rd|th)?\s+{_MONTH},?\s+\d{{2,4}}$', re.IGNORECASE),
    # March 12, 2020
    re.compile(rf'^{_MONTH}\s+\d{{1,2}}(st|nd|rd|th)?,?\s+\d{{2,4}}$', re.IGNORECASE),
    # March 2020
    re.compile(rf'^{_MONTH}\s+\d{{4}}$', re.IGNORECASE),
]

# A year on its own
YEAR_PATTERN = re.compile(r'^(18|19|20)\d{2}$')


# ============================================================================
# HELPERS
# ============================================================================

def _as_text(value: Any) -> Optional[str]:
    """Stripped string form of a cell, or None when it cannot match anything."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _plausible_day_month(first: int, second: int) -> bool:
    """True if (first, second) reads as day/month or month/day."""
    return (1 <= first <= 31 and 1 <= second <= 12) or (1 <= first <= 12 and 1 <= second <= 31)


# ============================================================================
# PREDICATES
# ============================================================================

def is_zip_code(value: Any) -> bool:
    text = _as_text(value)
    return text is not None and bool(ZIP_PATTERN.match(text))


def is_date(value: Any) -> bool:
    """Day/month/year in common separators, a textual month, or a year alone."""
    text = _as_text(value)
    if text is None:
        return False

    match = NUMERIC_DATE_PATTERN.match(text)
    if match:
        return _plausible_day_month(int(match.group(1)), int(match.group(3)))

    match = ISO_DATE_PATTERN.match(text)
    if match:
        month, day = int(match.group(3)), int(match.group(4))
        return 1 <= month <= 12 and 1 <= day <= 31

    if any(pattern.match(text) for pattern in TEXTUAL_DATE_PATTERNS):
        return True

    return bool(YEAR_PATTERN.match(text))


def is_email(value: Any) -> bool:
    text = _as_text(value)
    return text is not None and bool(EMAIL_PATTERN.match(text))


def is_ssn(value: Any) -> bool:
    text = _as_text(value)
    return text is not None and bool(SSN_PATTERN.match(text))


def is_iban(value: Any) -> bool:
    """IBAN-shaped account number; grouping spaces are ignored."""
    text = _as_text(value)
    if text is None:
        return False
    return bool(IBAN_PATTERN.match(text.replace(" ", "")))


def is_vin(value: Any) -> bool:
    text = _as_text(value)
    return text is not None and bool(VIN_PATTERN.match(text))


def is_url(value: Any) -> bool:
    text = _as_text(value)
    return text is not None and bool(URL_PATTERN.match(text))


def is_ip_address(value: Any) -> bool:
    """Dotted-quad IPv4 or colon-grouped IPv6 literal."""
    text = _as_text(value)
    if text is None:
        return False
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def is_name(value: Any) -> bool:
    """
    Low-confidence heuristic: one to four title-case alphabetic tokens.

    Accepts forms like "Jane", "Mary Ann Smith", "O'Neil" and
    "Smith-Jones". Anything containing digits or lowercase-initial words
    is rejected.
    """
    text = _as_text(value)
    return text is not None and bool(NAME_PATTERN.match(text))
