"""Safe parser for JavaScript array literals made only of string literals.

``styleUrls`` values are read with this scanner instead of being evaluated.
Supported shapes::

    []
    ['a.css']
    ['a.css', "b.css", `c.css`,]     // trailing comma allowed
    [
      'a.css', /* comment */
      'b.css'  // comment
    ]

Identifiers, concatenation, template substitutions (``${...}``) and nested
arrays are rejected with ``StyleUrlsParseError``.
"""

from __future__ import annotations

from inline_resources.errors import StyleUrlsParseError

QUOTES = frozenset("'\"`")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def _skip_trivia(text: str, pos: int) -> int:
    """Skip whitespace and ``//`` / ``/* */`` comments starting at ``pos``."""
    while pos < len(text):
        ch = text[pos]
        if ch.isspace():
            pos += 1
        elif text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = len(text) if newline == -1 else newline + 1
        elif text.startswith("/*", pos):
            end = text.find("*/", pos + 2)
            if end == -1:
                raise StyleUrlsParseError("Unterminated comment", text=text, offset=pos)
            pos = end + 2
        else:
            break
    return pos


def _read_hex(text: str, start: int, count: int) -> tuple[str, int]:
    digits = text[start : start + count]
    if (
        not digits
        or len(digits) != count
        or any(c not in "0123456789abcdefABCDEF" for c in digits)
        or int(digits, 16) > 0x10FFFF
    ):
        raise StyleUrlsParseError("Invalid hex escape", text=text, offset=start)
    return chr(int(digits, 16)), start + count


def _read_escape(text: str, pos: int) -> tuple[str, int]:
    """Decode the escape whose backslash sits at ``pos - 1``."""
    if pos >= len(text):
        raise StyleUrlsParseError("Unterminated string", text=text, offset=pos)
    ch = text[pos]
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch], pos + 1
    if ch == "x":
        return _read_hex(text, pos + 1, 2)
    if ch == "u":
        if text.startswith("{", pos + 1):
            end = text.find("}", pos + 2)
            if end == -1:
                raise StyleUrlsParseError("Invalid unicode escape", text=text, offset=pos)
            value, _ = _read_hex(text, pos + 2, end - pos - 2)
            return value, end + 1
        return _read_hex(text, pos + 1, 4)
    if ch == "\r":
        # Line continuation; swallow a following \n too.
        return "", pos + 2 if text.startswith("\n", pos + 1) else pos + 1
    if ch in "\n\u2028\u2029":
        return "", pos + 1
    return ch, pos + 1


def _read_string(text: str, pos: int) -> tuple[str, int]:
    """Read the string literal opening at ``pos``; return (value, next_pos)."""
    quote = text[pos]
    start = pos
    pos += 1
    chars: list[str] = []
    while pos < len(text):
        ch = text[pos]
        if ch == quote:
            return "".join(chars), pos + 1
        if ch == "\\":
            decoded, pos = _read_escape(text, pos + 1)
            chars.append(decoded)
            continue
        if quote == "`" and text.startswith("${", pos):
            raise StyleUrlsParseError(
                "Template substitutions are not supported", text=text, offset=pos
            )
        if ch in "\r\n" and quote != "`":
            break
        chars.append(ch)
        pos += 1
    raise StyleUrlsParseError("Unterminated string", text=text, offset=start)


def parse_string_array(text: str) -> list[str]:
    """Parse ``text`` as an array literal of strings, preserving order."""
    pos = _skip_trivia(text, 0)
    if not text.startswith("[", pos):
        raise StyleUrlsParseError("Expected '['", text=text, offset=pos)
    pos += 1

    values: list[str] = []
    expect_value = True
    while True:
        pos = _skip_trivia(text, pos)
        if pos >= len(text):
            raise StyleUrlsParseError("Expected ']'", text=text, offset=pos)
        ch = text[pos]
        if ch == "]":
            pos += 1
            break
        if not expect_value:
            if ch != ",":
                raise StyleUrlsParseError("Expected ',' or ']'", text=text, offset=pos)
            expect_value = True
            pos += 1
            continue
        if ch not in QUOTES:
            raise StyleUrlsParseError("Expected a string literal", text=text, offset=pos)
        value, pos = _read_string(text, pos)
        values.append(value)
        expect_value = False

    pos = _skip_trivia(text, pos)
    if pos != len(text):
        raise StyleUrlsParseError("Unexpected trailing content", text=text, offset=pos)
    return values


__all__ = ["QUOTES", "parse_string_array"]
