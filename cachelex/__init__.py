from cachelex._core import (
    CacheControl as CacheControl,
    Cursor as Cursor,
    Directive as Directive,
    ExtractedLength as ExtractedLength,
    HeaderList as HeaderList,
    HeaderValues as HeaderValues,
    LengthAbsent as LengthAbsent,
    LengthFailure as LengthFailure,
    LengthValue as LengthValue,
    Vary as Vary,
    collect_an_http_quoted_string as collect_an_http_quoted_string,
    contains_cache_control_directive as contains_cache_control_directive,
    content_length as content_length,
    extract_cache_control_directive as extract_cache_control_directive,
    extract_length as extract_length,
    iter_cache_control_directives as iter_cache_control_directives,
    parse_cache_control as parse_cache_control,
    unquote as unquote,
)
from cachelex._exceptions import (
    CacheLexError as CacheLexError,
    ContentLengthError as ContentLengthError,
    ParseError as ParseError,
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
    ## Exceptions
    "CacheLexError",
    "ContentLengthError",
    "ParseError",
)

__version__ = "0.1.0"
