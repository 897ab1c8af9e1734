import httpx
import pytest

from cachelex import LengthFailure, LengthValue
from cachelex.httpx import to_header_list


def test_response_headers_keep_order_casing_and_duplicates():
    response = httpx.Response(
        200,
        headers=[
            (b"Cache-Control", b"max-age=60"),
            (b"Content-Length", b"42"),
            (b"content-length", b"42"),
        ],
    )

    headers = to_header_list(response)

    assert list(headers) == [
        ("Cache-Control", "max-age=60"),
        ("Content-Length", "42"),
        ("content-length", "42"),
    ]
    assert headers.extract_length() == LengthValue(42)
    assert headers.cache_control().max_age == 60


def test_conflicting_response_lengths():
    response = httpx.Response(200, headers=[("Content-Length", "1"), ("Content-Length", "2")])

    assert to_header_list(response).extract_length() == LengthFailure(reason="conflict", values=("1", "2"))


def test_request_headers():
    request = httpx.Request("GET", "https://example.com", headers={"Cache-Control": "no-cache"})

    headers = to_header_list(request)

    assert list(headers.get_all("cache-control")) == ["no-cache"]
    assert "Host" in headers


def test_plain_headers():
    headers = to_header_list(httpx.Headers({"Vary": "Accept"}))

    assert list(headers) == [("Vary", "Accept")]


def test_unsupported_type():
    with pytest.raises(TypeError):
        to_header_list({"Vary": "Accept"})  # type: ignore[call-overload]
