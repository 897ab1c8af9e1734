from typing import Any, List

import pytest
from inline_snapshot import snapshot

from cachelex import (
    ContentLengthError,
    HeaderList,
    LengthAbsent,
    LengthFailure,
    LengthValue,
    content_length,
    extract_length,
)


def make_headers(*values: str) -> HeaderList:
    headers = HeaderList([("Date", "Mon, 25 Aug 2015 12:00:00 GMT")])
    for value in values:
        headers.append("Content-Length", value)
    return headers


def test_no_content_length():
    assert extract_length(make_headers()) == LengthAbsent()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("42", 42),
        ("0", 0),
        ("007", 7),
        ("18446744073709551615", 18446744073709551615),
    ],
)
def test_valid_content_length(value: str, expected: int) -> None:
    assert extract_length(make_headers(value)) == LengthValue(expected)


def test_name_is_case_insensitive():
    headers = HeaderList([("content-LENGTH", "5")])

    assert headers.extract_length() == LengthValue(5)


@pytest.mark.parametrize("value", ["", "abc", "42abc", "-1", "+1", " 42", "42 ", "4 2", "0x10", "٣"])
def test_malformed_content_length(value: str) -> None:
    assert extract_length(make_headers(value)) == LengthFailure(reason="malformed", values=(value,))


def test_one_malformed_value_fails_everything():
    result = extract_length(make_headers("42", "42", "x"))

    assert result == LengthFailure(reason="malformed", values=("42", "42", "x"))


def test_identical_duplicates_are_accepted():
    assert extract_length(make_headers("42", "42")) == LengthValue(42)


@pytest.mark.parametrize("values", [["42", "43"], ["42", "042"], ["1", "1", "2"]])
def test_conflicting_content_length(values: List[str]) -> None:
    result = extract_length(make_headers(*values))

    assert isinstance(result, LengthFailure)
    assert result.reason == "conflict"


@pytest.mark.parametrize("value", ["18446744073709551616", "99999999999999999999999"])
def test_overflowing_content_length(value: str) -> None:
    assert extract_length(make_headers(value)) == LengthFailure(reason="overflow", values=(value,))


def test_rejections_are_logged(caplog: Any) -> None:
    with caplog.at_level("DEBUG"):
        extract_length(make_headers("42", "43"))
        extract_length(make_headers("-1"))

    assert caplog.record_tuples == snapshot(
        [
            ("cachelex.core.content_length", 10, "Rejecting conflicting Content-Length values: ['42', '43']"),
            ("cachelex.core.content_length", 10, "Rejecting malformed Content-Length value: '-1'"),
        ]
    )


class TestContentLength:
    def test_absent(self):
        assert content_length(make_headers()) is None

    def test_value(self):
        assert content_length(make_headers("10", "10")) == 10

    def test_failure_raises(self):
        with pytest.raises(ContentLengthError, match="conflict") as exc_info:
            content_length(make_headers("10", "11"))

        assert exc_info.value.failure == LengthFailure(reason="conflict", values=("10", "11"))


class TestLongContentLength:
    def test_many_digits_overflow(self):
        value = "1" * 5000

        assert extract_length(make_headers(value)) == LengthFailure(reason="overflow", values=(value,))

    def test_leading_zeros(self):
        assert extract_length(make_headers("0" * 5000 + "42")) == LengthValue(42)

    def test_leading_zeros_before_max(self):
        assert extract_length(make_headers("0" * 5000 + "18446744073709551615")) == LengthValue(18446744073709551615)

    def test_leading_zeros_before_overflow(self):
        value = "0" * 5000 + "18446744073709551616"

        assert extract_length(make_headers(value)) == LengthFailure(reason="overflow", values=(value,))

    def test_only_zeros(self):
        assert extract_length(make_headers("0" * 5000)) == LengthValue(0)

    def test_dedup_is_on_raw_text(self):
        result = extract_length(make_headers("0" * 5000 + "42", "42"))

        assert isinstance(result, LengthFailure)
        assert result.reason == "conflict"
