from __future__ import annotations

import string
import typing as tp

HEADERS_ENCODING = "iso-8859-1"

# Largest value representable as an unsigned 64-bit integer.
MAX_CONTENT_LENGTH = 2**64 - 1
MAX_CONTENT_LENGTH_DIGITS = len(str(MAX_CONTENT_LENGTH))

# RFC 9111 Section 1.2.2: delta-seconds that overflow are sent as 2^31.
DELTA_SECONDS_MAX = 2147483647
DELTA_SECONDS_MAX_DIGITS = len(str(DELTA_SECONDS_MAX))

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """
    Lowercase only the ASCII letters of `text`.

    Unlike `str.lower`, non-ASCII characters are left untouched, which is what
    HTTP field and directive names require.
    """
    return text.translate(_ASCII_LOWER)


def ascii_equals_ignoring_case(left: str, right: str) -> bool:
    """
    Compare two strings for equality, ignoring the case of ASCII letters only.

    Examples:
        >>> ascii_equals_ignoring_case("Content-Length", "content-length")
        True
        >>> ascii_equals_ignoring_case("max-age", "max_age")
        False
    """
    if len(left) != len(right):
        return False
    return ascii_lower(left) == ascii_lower(right)


def is_ascii_digits(text: str) -> bool:
    # str.isdigit accepts non-ASCII digits such as "٣"
    return bool(text) and all("0" <= char <= "9" for char in text)


def ensure_str(value: tp.Union[str, bytes], encoding: str = HEADERS_ENCODING) -> str:
    if isinstance(value, bytes):
        return value.decode(encoding)
    if isinstance(value, str):
        return value
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")
