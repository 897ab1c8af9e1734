from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional

"""
HTTP quoted-string lexing utilities.

These functions implement the RFC 9110 rules for tokens and quoted strings
over an explicit cursor, so that callers can resume scanning exactly where
the lexer stopped.
"""

# RFC 9110 Section 5.6.2
TCHAR = frozenset("!#$%&'*+-.^_`|~" + string.digits + string.ascii_letters)

DQUOTE = '"'
BACKSLASH = "\\"


def is_token_char(c: str) -> bool:
    """
    Check if character is valid in an HTTP token.

    Per RFC 9110 Section 5.6.2:
    tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*"
          / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
          / DIGIT / ALPHA

    Examples:
        >>> is_token_char('a')
        True
        >>> is_token_char('-')
        True
        >>> is_token_char(',')
        False
        >>> is_token_char('=')
        False
    """
    return c in TCHAR


def is_qd_text(c: str) -> bool:
    r"""
    Check if character is valid in quoted-text.

    Per RFC 9110 Section 5.6.4:
    qdtext   = HTAB / SP / %x21 / %x23-5B / %x5D-7E / obs-text
    obs-text = %x80-FF

    Examples:
        >>> is_qd_text("a")
        True
        >>> is_qd_text("\t")
        True
        >>> is_qd_text('"')
        False
        >>> is_qd_text("\\")
        False
        >>> is_qd_text("\x7f")
        False
    """
    if not c:
        return False

    b = ord(c)
    return (
        b == 0x09  # HTAB
        or b == 0x20  # SP
        or b == 0x21  # !
        or (0x23 <= b <= 0x5B)  # # to [ (skips ")
        or (0x5D <= b <= 0x7E)  # ] to ~ (skips \)
        or (0x80 <= b <= 0xFF)
    )  # obs-text


def is_token(text: str) -> bool:
    """token = 1*tchar"""
    return bool(text) and all(is_token_char(c) for c in text)


@dataclass
class Cursor:
    """
    A read position over a string.

    The directive scanner hands the same cursor to the quoted-string lexer and
    carries on from `position` once it returns.
    """

    text: str
    position: int = 0

    def is_eof(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        index = self.position + offset
        if index < len(self.text):
            return self.text[index]
        return ""

    def ignore(self, count: int = 1) -> None:
        self.position = min(self.position + count, len(self.text))

    def consume_specific(self, char: str) -> bool:
        if self.peek() == char:
            self.ignore()
            return True
        return False

    def consume_until(self, char: str) -> str:
        """Consume up to, but not including, the next `char` (or to the end)."""
        start = self.position
        index = self.text.find(char, start)
        self.position = len(self.text) if index == -1 else index
        return self.text[start : self.position]

    def remaining(self) -> str:
        return self.text[self.position :]


def collect_an_http_quoted_string(cursor: Cursor, extract_value: bool = False) -> Optional[str]:
    r"""
    Collect the next HTTP quoted string at or after the cursor.

    Per RFC 9110 Section 5.6.4:
    quoted-string = DQUOTE *( qdtext / quoted-pair ) DQUOTE
    quoted-pair   = "\" ( HTAB / SP / VCHAR / obs-text )

    Any text before the opening quote is skipped. On success the cursor is left
    just past the closing quote. A backslash always escapes the character after
    it, so an escaped quote never terminates the string.

    Args:
        cursor: Cursor to read from. Advanced on success, untouched on failure.
        extract_value: When True, return the unescaped content without the
            surrounding quotes instead of the literal token.

    Returns:
        The quoted-string token including its quotes and escapes verbatim
        (or its value when `extract_value` is set), or None if there is no
        opening quote or the string is unterminated.

    Examples:
        >>> collect_an_http_quoted_string(Cursor('foo="abc" bar', 4))
        '"abc"'
        >>> collect_an_http_quoted_string(Cursor('"a\\"b"'))
        '"a\\"b"'
        >>> collect_an_http_quoted_string(Cursor('"a\\"b"'), extract_value=True)
        'a"b'
        >>> collect_an_http_quoted_string(Cursor('"unterminated')) is None
        True
    """
    start = cursor.position

    cursor.consume_until(DQUOTE)
    if cursor.is_eof():
        cursor.position = start
        return None

    token_start = cursor.position
    cursor.ignore()

    value: list[str] = []
    while not cursor.is_eof():
        char = cursor.peek()

        if char == DQUOTE:
            cursor.ignore()
            if extract_value:
                return "".join(value)
            return cursor.text[token_start : cursor.position]

        if char == BACKSLASH:
            if cursor.position + 1 >= len(cursor.text):
                # A lone trailing backslash cannot be closed.
                break
            value.append(cursor.peek(1))
            cursor.ignore(2)
        else:
            value.append(char)
            cursor.ignore()

    cursor.position = start
    return None


def unquote(value: str) -> str:
    r"""
    Return the content of a quoted-string token, or `value` unchanged.

    Only a value that is exactly one complete quoted string is unquoted.

    Examples:
        >>> unquote('"4"')
        '4'
        >>> unquote('"a\\\\b"')
        'a\\b'
        >>> unquote('4')
        '4'
        >>> unquote('"4')
        '"4'
    """
    if not value.startswith(DQUOTE):
        return value

    cursor = Cursor(value)
    result = collect_an_http_quoted_string(cursor, extract_value=True)
    if result is None or not cursor.is_eof():
        return value
    return result
