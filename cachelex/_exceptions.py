from __future__ import annotations

import typing as tp

if tp.TYPE_CHECKING:
    from cachelex._core._content_length import LengthFailure

__all__ = ("CacheLexError", "ParseError", "ContentLengthError")


class CacheLexError(Exception): ...


class ParseError(CacheLexError): ...


class ContentLengthError(ParseError):
    def __init__(self, failure: LengthFailure) -> None:
        super().__init__(f"Invalid Content-Length ({failure.reason}): {list(failure.values)!r}")
        self.failure = failure
