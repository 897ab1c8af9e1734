from __future__ import annotations

from typing import Union, overload

import httpx

from cachelex._core._headers import HeaderList

__all__ = ("to_header_list",)


@overload
def to_header_list(value: httpx.Headers) -> HeaderList: ...


@overload
def to_header_list(value: httpx.Request) -> HeaderList: ...


@overload
def to_header_list(value: httpx.Response) -> HeaderList: ...


def to_header_list(
    value: Union[httpx.Headers, httpx.Request, httpx.Response],
) -> HeaderList:
    """
    Convert httpx headers (or the headers of an httpx.Request/httpx.Response) to a HeaderList.

    The raw header list is used so that order, duplicates and the original
    name casing all survive the conversion.
    """
    if isinstance(value, (httpx.Request, httpx.Response)):
        headers = value.headers
    elif isinstance(value, httpx.Headers):
        headers = value
    else:
        raise TypeError(f"Expected httpx.Headers, httpx.Request or httpx.Response, got {type(value).__name__}")

    return HeaderList.from_raw(headers.raw, encoding=headers.encoding)
