"""Pure string predicates used as rule bodies.

None of these raise; each returns a bool for a string argument.
"""

import re
from datetime import date
from urllib.parse import urlsplit

NUMBER_REGEX = re.compile(r"\d", re.ASCII)
UPPERCASE_REGEX = re.compile(r"[A-Z]")
LOWERCASE_REGEX = re.compile(r"[a-z]")
WHITESPACE_REGEX = re.compile(r"\s")
SPECIAL_CHAR_REGEX = re.compile(r"[\W_]", re.ASCII)
ONLY_NUMBERS_REGEX = re.compile(r"\d+", re.ASCII)
ONLY_CHARS_REGEX = re.compile(r"[a-zA-Z]+")
NO_SPECIAL_CHARS_REGEX = re.compile(r"[a-zA-Z0-9]*")
EMAIL_REGEX = re.compile(r"([a-zA-Z0-9_\-.]+)@([a-zA-Z0-9_\-.]+)\.([a-zA-Z]{2,5})")
IP_REGEX = re.compile(
    r"(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)
URL_REGEX = re.compile(
    r"(?:(?:https?|ftp)://)?[a-zA-Z0-9_\-]+(\.[a-zA-Z0-9_\-]+)*\.[a-zA-Z]{2,5}"
    r"(/[a-zA-Z0-9_\-]+)*"
    r"(\?[a-zA-Z0-9_\-]+=[a-zA-Z0-9_\-]+(&[a-zA-Z0-9_\-]+=[a-zA-Z0-9_\-]+)*)?"
)
ISO8601_DATE_REGEX = re.compile(
    r"(?P<year>-?(?:[1-9][0-9]*)?[0-9]{4})[-/](?P<month>1[0-2]|0[1-9])[-/]"
    r"(?P<day>3[01]|0[1-9]|[12][0-9])"
)
ISO8601_DATETIME_REGEX = re.compile(
    ISO8601_DATE_REGEX.pattern
    + r"T(2[0-3]|[01][0-9]):([0-5][0-9]):([0-5][0-9])(\.[0-9]+)?"
    r"(Z|[+-](?:2[0-3]|[01][0-9]):[0-5][0-9])?"
)
BTC_ADDRESS_REGEX = re.compile(r"(bc1|[13])[a-zA-HJ-NP-Z0-9]{25,39}")
ETH_ADDRESS_REGEX = re.compile(r"0x[a-fA-F0-9]{40}")
JWT_REGEX = re.compile(r"[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+")


def is_email(value: str) -> bool:
    return EMAIL_REGEX.fullmatch(value) is not None


def is_url(value: str, strict: bool = False) -> bool:
    """Loose pattern check by default; ``strict`` requires a parseable absolute URL."""
    if not strict:
        return URL_REGEX.fullmatch(value) is not None
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def is_ip(value: str) -> bool:
    return IP_REGEX.fullmatch(value) is not None


def is_iso8601(value: str) -> bool:
    """Date or date-time in ISO8601 form naming a real calendar day."""
    match = ISO8601_DATE_REGEX.fullmatch(value) or ISO8601_DATETIME_REGEX.fullmatch(value)
    if match is None:
        return False
    try:
        date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        return False
    return True


def is_btc_address(value: str) -> bool:
    return BTC_ADDRESS_REGEX.fullmatch(value) is not None


def is_eth_address(value: str) -> bool:
    return ETH_ADDRESS_REGEX.fullmatch(value) is not None


def is_jwt(value: str) -> bool:
    """Shape check only: three base64url segments separated by dots."""
    return JWT_REGEX.fullmatch(value) is not None


def contains_only_numbers(value: str) -> bool:
    return ONLY_NUMBERS_REGEX.fullmatch(value) is not None


def contains_only_letters(value: str) -> bool:
    return ONLY_CHARS_REGEX.fullmatch(value) is not None


def contains_uppercase(value: str) -> bool:
    return UPPERCASE_REGEX.search(value) is not None


def contains_lowercase(value: str) -> bool:
    return LOWERCASE_REGEX.search(value) is not None


def contains_special_character(value: str) -> bool:
    return SPECIAL_CHAR_REGEX.search(value) is not None


def contains_numbers(value: str) -> bool:
    return NUMBER_REGEX.search(value) is not None


def not_contains_numbers(value: str) -> bool:
    return not contains_numbers(value)


def not_contains_special_character(value: str) -> bool:
    return NO_SPECIAL_CHARS_REGEX.fullmatch(value) is not None


def not_contains_whitespace(value: str) -> bool:
    return WHITESPACE_REGEX.search(value) is None


def is_not_blank(value: str) -> bool:
    return value.strip() != ""


def is_not_empty(value: str) -> bool:
    return value != ""


def has_length(value: str, length: int) -> bool:
    return len(value) == length


def contains_repeated_chars(value: str) -> bool:
    return len(set(value)) != len(value)


def not_contains_repeated_chars(value: str) -> bool:
    return not contains_repeated_chars(value)

