from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

from cachelex._core._lexer import is_token
from cachelex._utils import HEADERS_ENCODING, ascii_equals_ignoring_case, ensure_str

if TYPE_CHECKING:
    from cachelex._core._cache_control import CacheControl
    from cachelex._core._content_length import ExtractedLength

__all__ = ("HeaderList", "HeaderValues", "Vary")

RawHeaders = Iterable[Tuple[Union[str, bytes], Union[str, bytes]]]


class HeaderValues:
    """
    Values of every entry called `name`, in insertion order.

    This is a view: it is evaluated lazily, can be iterated any number of
    times and sees entries appended after it was created.
    """

    def __init__(self, headers: "HeaderList", name: str) -> None:
        self._headers = headers
        self._name = name

    def __iter__(self) -> Iterator[str]:
        for name, value in self._headers:
            if ascii_equals_ignoring_case(name, self._name):
                yield value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}: {list(self)!r}>"


class HeaderList:
    """
    An ordered list of header fields.

    Duplicate names are kept as separate entries and names keep the casing they
    were added with; every lookup compares names case-insensitively.
    """

    def __init__(self, headers: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._entries: List[Tuple[str, str]] = []
        if headers is not None:
            for name, value in headers:
                self.append(name, value)

    @classmethod
    def from_raw(cls, headers: RawHeaders, encoding: str = HEADERS_ENCODING) -> "HeaderList":
        """
        Build a header list from (name, value) pairs of `str` or `bytes`.

        Bytes are decoded with `encoding`, ISO-8859-1 by default, which maps
        every octet to a character and so never fails.
        """
        return cls((ensure_str(name, encoding), ensure_str(value, encoding)) for name, value in headers)

    def append(self, name: str, value: str) -> None:
        self._entries.append((name, value))

    def get_all(self, name: str) -> HeaderValues:
        return HeaderValues(self, name)

    def get(self, name: str) -> Optional[str]:
        """
        Combine all values for `name` with ", ", or None if there are none.
        """
        values = list(self.get_all(name))
        if not values:
            return None
        return ", ".join(values)

    def extract_length(self) -> "ExtractedLength":
        from cachelex._core._content_length import extract_length

        return extract_length(self)

    def cache_control(self) -> "CacheControl":
        from cachelex._core._cache_control import parse_cache_control

        return parse_cache_control(self.get_all("Cache-Control"))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return any(ascii_equals_ignoring_case(entry_name, name) for entry_name, _ in self._entries)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, HeaderList) and self._entries == other._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class Vary:
    def __init__(self, values: List[str]) -> None:
        self.values = values

    @classmethod
    def from_value(cls, vary_value: str) -> "Vary":
        return cls.from_values([vary_value])

    @classmethod
    def from_values(cls, vary_values: Iterable[str]) -> "Vary":
        values = []

        for vary_value in vary_values:
            for field_name in vary_value.split(","):
                field_name = field_name.strip(" \t")
                if field_name == "*" or is_token(field_name):
                    values.append(field_name)
        return cls(values)

    @classmethod
    def from_headers(cls, headers: HeaderList) -> "Vary":
        return cls.from_values(headers.get_all("Vary"))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.values!r}>"
