from cachelex._core._cache_control import (
    CacheControl as CacheControl,
    Directive as Directive,
    contains_cache_control_directive as contains_cache_control_directive,
    extract_cache_control_directive as extract_cache_control_directive,
    iter_cache_control_directives as iter_cache_control_directives,
    parse_cache_control as parse_cache_control,
)
from cachelex._core._content_length import (
    ExtractedLength as ExtractedLength,
    LengthAbsent as LengthAbsent,
    LengthFailure as LengthFailure,
    LengthValue as LengthValue,
    content_length as content_length,
    extract_length as extract_length,
)
from cachelex._core._headers import (
    HeaderList as HeaderList,
    HeaderValues as HeaderValues,
    Vary as Vary,
)
from cachelex._core._lexer import (
    Cursor as Cursor,
    collect_an_http_quoted_string as collect_an_http_quoted_string,
    unquote as unquote,
)

__all__ = (
    ## Lexer
    "Cursor",
    "collect_an_http_quoted_string",
    "unquote",
    ## Cache-Control
    "CacheControl",
    "Directive",
    "contains_cache_control_directive",
    "extract_cache_control_directive",
    "iter_cache_control_directives",
    "parse_cache_control",
    ## Headers
    "HeaderList",
    "HeaderValues",
    "Vary",
    ## Content-Length
    "ExtractedLength",
    "LengthAbsent",
    "LengthFailure",
    "LengthValue",
    "content_length",
    "extract_length",
)
