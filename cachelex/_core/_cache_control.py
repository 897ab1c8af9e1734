from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, NamedTuple, Optional, Union

from cachelex._core._lexer import DQUOTE, Cursor, collect_an_http_quoted_string, is_token, unquote
from cachelex._utils import (
    DELTA_SECONDS_MAX,
    DELTA_SECONDS_MAX_DIGITS,
    ascii_equals_ignoring_case,
    ascii_lower,
    is_ascii_digits,
)

__all__ = (
    "CacheControl",
    "Directive",
    "contains_cache_control_directive",
    "extract_cache_control_directive",
    "iter_cache_control_directives",
    "parse_cache_control",
)

logger = logging.getLogger("cachelex.core.cache_control")

OWS = " \t"


class Directive(NamedTuple):
    name: str
    value: Optional[str]


def _parse_directive(segment: str) -> Optional[Directive]:
    name, equals, value = segment.partition("=")
    name = name.strip(OWS)

    if not equals:
        return Directive(name, None)

    value = value.strip(OWS)
    if value.startswith(DQUOTE):
        token = collect_an_http_quoted_string(Cursor(value))
        if token is None:
            return None
        value = token

    return Directive(name, value)


def iter_cache_control_directives(field_value: Optional[str]) -> Iterator[Directive]:
    """
    Split a Cache-Control field value into directives, in field order.

    Commas inside quoted strings do not separate directives. Empty segments
    are skipped. A segment holding an unterminated quoted string swallows the
    rest of the field and yields nothing.

    Quoted values are returned as written, quotes and escapes included.
    """
    if not field_value:
        return

    cursor = Cursor(field_value)

    while not cursor.is_eof():
        start = cursor.position
        malformed = False

        while not cursor.is_eof() and cursor.peek() != ",":
            if cursor.peek() == DQUOTE:
                if collect_an_http_quoted_string(cursor) is None:
                    malformed = True
                    cursor.ignore(len(cursor.text))
                    break
            else:
                cursor.ignore()

        segment = field_value[start : cursor.position].strip(OWS)
        cursor.consume_specific(",")

        if malformed:
            logger.debug("Skipping Cache-Control directive with an unterminated quoted string: %r", segment)
            continue
        if not segment:
            continue

        directive = _parse_directive(segment)
        if directive is None:
            logger.debug("Skipping malformed Cache-Control directive: %r", segment)
            continue

        yield directive


def _find_directive(field_value: Optional[str], name: str) -> Optional[Directive]:
    if not name:
        return None

    for directive in iter_cache_control_directives(field_value):
        if directive.name and ascii_equals_ignoring_case(directive.name, name):
            return directive
    return None


def contains_cache_control_directive(field_value: Optional[str], name: str) -> bool:
    """
    Check whether the Cache-Control field value carries the directive `name`.

    Names are compared case-insensitively.

    Examples:
        >>> contains_cache_control_directive("public, No-Cache", "no-cache")
        True
        >>> contains_cache_control_directive("abno-cache", "no-cache")
        False
    """
    return _find_directive(field_value, name) is not None


def extract_cache_control_directive(field_value: Optional[str], name: str) -> Optional[str]:
    """
    Return the value of the first directive called `name`.

    A directive without `=` yields an empty string, a missing one yields None.
    The value is returned verbatim, so a quoted value keeps its quotes.

    Examples:
        >>> extract_cache_control_directive("max-age = 4 , no-cache", "max-age")
        '4'
        >>> extract_cache_control_directive("no-cache", "no-cache")
        ''
        >>> extract_cache_control_directive('max-age="4,5"', "max-age")
        '"4,5"'
        >>> extract_cache_control_directive("max-age=4, max-age=5", "max-age")
        '4'
    """
    directive = _find_directive(field_value, name)
    if directive is None:
        return None
    return "" if directive.value is None else directive.value


class CacheControl:
    """
    Typed view of the Cache-Control directives found on a message.

    Supported Directives:
    - immutable [RFC8246]
    - max-age [RFC9111, Section 5.2.1.1, 5.2.2.1]
    - max-stale [RFC9111, Section 5.2.1.2]
    - min-fresh [RFC9111, Section 5.2.1.3]
    - must-revalidate [RFC9111, Section 5.2.2.2]
    - must-understand [RFC9111, Section 5.2.2.3]
    - no-cache [RFC9111, Section 5.2.1.4, 5.2.2.4]
    - no-store [RFC9111, Section 5.2.1.5, 5.2.2.5]
    - no-transform [RFC9111, Section 5.2.1.6, 5.2.2.6]
    - only-if-cached [RFC9111, Section 5.2.1.7]
    - private [RFC9111, Section 5.2.2.7]
    - proxy-revalidate [RFC9111, Section 5.2.2.8]
    - public [RFC9111, Section 5.2.2.9]
    - s-maxage [RFC9111, Section 5.2.2.10]
    - stale-if-error [RFC5861, Section 4]
    - stale-while-revalidate [RFC5861, Section 3]

    no_cache and private can be:
        - False: directive not present
        - True: directive present without field names
        - List[str]: directive present with specific field names
    """

    def __init__(self) -> None:
        # Common directives
        self.max_age: Optional[int] = None
        self.no_store: bool = False
        self.no_transform: bool = False

        # Request-specific
        self.max_stale: Optional[int] = None
        self.min_fresh: Optional[int] = None
        self.only_if_cached: bool = False

        # Response-specific
        self.must_revalidate: bool = False
        self.must_understand: bool = False
        self.public: bool = False
        self.proxy_revalidate: bool = False
        self.s_maxage: Optional[int] = None
        self.immutable: bool = False

        # Can be boolean or contain field names
        self.no_cache: Union[bool, List[str]] = False
        self.private: Union[bool, List[str]] = False

        # Experimental
        self.stale_if_error: Optional[int] = None
        self.stale_while_revalidate: Optional[int] = None

        # Unrecognized directives, as written
        self.extensions: List[str] = []

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{key}={value!r}"
            for key, value in vars(self).items()
            if value is not None and value is not False and value != []
        )
        return f"<{type(self).__name__} {fields}>"


DELTA_SECONDS_DIRECTIVES = {
    "max-age": "max_age",
    "s-maxage": "s_maxage",
    "max-stale": "max_stale",
    "min-fresh": "min_fresh",
    "stale-if-error": "stale_if_error",
    "stale-while-revalidate": "stale_while_revalidate",
}

BOOLEAN_DIRECTIVES = {
    "immutable": "immutable",
    "must-revalidate": "must_revalidate",
    "must-understand": "must_understand",
    "no-store": "no_store",
    "no-transform": "no_transform",
    "only-if-cached": "only_if_cached",
    "proxy-revalidate": "proxy_revalidate",
    "public": "public",
}

FIELD_NAMES_DIRECTIVES = {
    "no-cache": "no_cache",
    "private": "private",
}


def parse_delta_seconds(value: str) -> Optional[int]:
    """
    Parse delta-seconds (RFC 9111 Section 1.2.2), capping at 2147483647.

    Returns None for anything that is not 1*DIGIT.
    """
    if not is_ascii_digits(value):
        return None
    digits = value.lstrip("0") or "0"
    if len(digits) > DELTA_SECONDS_MAX_DIGITS:
        return DELTA_SECONDS_MAX
    return min(int(digits), DELTA_SECONDS_MAX)


def parse_field_names(value: str) -> List[str]:
    """Parse comma-separated field names, dropping anything that is not a token."""
    return [field for field in (f.strip(OWS) for f in value.split(",")) if is_token(field)]


def parse_cache_control(value: Union[str, Iterable[str], None]) -> CacheControl:
    """
    Parse one or more Cache-Control field values into a `CacheControl`.

    Each directive is looked up with first-occurrence-wins semantics, so a
    repeated directive never overrides the one seen first.

    Examples:
        >>> cc = parse_cache_control("public, max-age=3600, must-revalidate")
        >>> cc.public, cc.max_age, cc.must_revalidate
        (True, 3600, True)
        >>> parse_cache_control('no-cache="Set-Cookie, Authorization"').no_cache
        ['Set-Cookie', 'Authorization']
    """
    cc = CacheControl()

    if value is None:
        return cc
    field_values = [value] if isinstance(value, str) else list(value)

    seen: set[str] = set()
    for field_value in field_values:
        for directive in iter_cache_control_directives(field_value):
            name = ascii_lower(directive.name)
            if not name or name in seen:
                continue
            seen.add(name)
            _apply_directive(cc, name, directive)

    return cc


def _apply_directive(cc: CacheControl, name: str, directive: Directive) -> None:
    value = None if directive.value is None else unquote(directive.value)

    if name in DELTA_SECONDS_DIRECTIVES:
        if value is None:
            if name == "max-stale":
                # max-stale without value means accept any stale response
                cc.max_stale = DELTA_SECONDS_MAX
            return
        setattr(cc, DELTA_SECONDS_DIRECTIVES[name], parse_delta_seconds(value))

    elif name in BOOLEAN_DIRECTIVES:
        setattr(cc, BOOLEAN_DIRECTIVES[name], True)

    elif name in FIELD_NAMES_DIRECTIVES:
        setattr(cc, FIELD_NAMES_DIRECTIVES[name], True if value is None else parse_field_names(value))

    elif directive.value is None:
        cc.extensions.append(directive.name)
    else:
        cc.extensions.append(f"{directive.name}={directive.value}")
