from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

from typing_extensions import TypeAlias, assert_never

from cachelex._core._headers import HeaderList
from cachelex._exceptions import ContentLengthError
from cachelex._utils import MAX_CONTENT_LENGTH, MAX_CONTENT_LENGTH_DIGITS, is_ascii_digits

__all__ = (
    "ExtractedLength",
    "LengthAbsent",
    "LengthFailure",
    "LengthValue",
    "content_length",
    "extract_length",
)

logger = logging.getLogger("cachelex.core.content_length")


@dataclass(frozen=True)
class LengthAbsent:
    """The message has no Content-Length field."""


@dataclass(frozen=True)
class LengthValue:
    value: int


@dataclass(frozen=True)
class LengthFailure:
    """
    The Content-Length field cannot be trusted.

    RFC 9112 Section 6.3 requires a recipient to treat this as an
    unrecoverable error: the message framing is unknown.
    """

    reason: Literal["malformed", "conflict", "overflow"]
    values: Tuple[str, ...]


ExtractedLength: TypeAlias = Union[LengthAbsent, LengthValue, LengthFailure]


def extract_length(headers: HeaderList) -> ExtractedLength:
    """
    Extract the Content-Length of a message from all of its Content-Length fields.

    - No field at all gives `LengthAbsent`.
    - Any value that is not 1*DIGIT fails the whole extraction, even when the
      other values are fine.
    - Repeated identical values are accepted; distinct values conflict
      (RFC 9110 Section 8.6), which is a request smuggling vector.
    - A value that does not fit in an unsigned 64-bit integer overflows.
    """
    values = tuple(headers.get_all("Content-Length"))

    if not values:
        return LengthAbsent()

    for value in values:
        if not is_ascii_digits(value):
            logger.debug("Rejecting malformed Content-Length value: %r", value)
            return LengthFailure(reason="malformed", values=values)

    distinct = list(dict.fromkeys(values))
    if len(distinct) > 1:
        logger.debug("Rejecting conflicting Content-Length values: %r", distinct)
        return LengthFailure(reason="conflict", values=values)

    # int() refuses very long digit strings, so bound the length first.
    digits = distinct[0].lstrip("0") or "0"
    if len(digits) > MAX_CONTENT_LENGTH_DIGITS or int(digits) > MAX_CONTENT_LENGTH:
        logger.debug("Rejecting Content-Length that overflows 64 bits: %r", distinct[0])
        return LengthFailure(reason="overflow", values=values)

    return LengthValue(int(digits))


def content_length(headers: HeaderList) -> Optional[int]:
    """
    Return the Content-Length as an int, or None when the field is absent.

    Raises:
        ContentLengthError: the field is malformed, conflicting or too large.
    """
    result = extract_length(headers)

    if isinstance(result, LengthAbsent):
        return None
    elif isinstance(result, LengthValue):
        return result.value
    elif isinstance(result, LengthFailure):
        raise ContentLengthError(result)
    else:
        assert_never(result)
