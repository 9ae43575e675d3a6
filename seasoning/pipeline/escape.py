"""Reversible escaping between raw identifier text and CSS-safe tokens.

Escaped strings are what the conversion tables store and what ends up in
the stylesheet, so ``css_unescape(css_escape(x)) == x`` must hold for any
text the tables can receive.
"""

import re

_REPLACEMENT_CHARACTER = "\ufffd"
_MAX_CODE_POINT = 0x10FFFF

_ESCAPE_PATTERN = re.compile(r"\\(?:([0-9A-Fa-f]{1,6})[\t\n\f\r ]?|(.))", re.DOTALL)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _escape_code_point(char: str) -> str:
    return f"\\{ord(char):x} "


def css_escape(value: str) -> str:
    """Escape a string so it can be used as a CSS identifier.

    Follows the CSSOM "serialize an identifier" algorithm.

    Args:
        value: Raw identifier text

    Returns:
        Escaped identifier text

    Examples:
        -      ->  \\-
        0      ->  \\30 (with trailing space)
        a.b    ->  a\\.b
    """
    if value == "-":
        return "\\-"

    first = value[:1]
    result: list[str] = []
    for index, char in enumerate(value):
        code = ord(char)

        if code == 0:
            result.append(_REPLACEMENT_CHARACTER)
            continue

        if (
            0x01 <= code <= 0x1F
            or code == 0x7F
            or (index == 0 and _is_ascii_digit(char))
            or (index == 1 and _is_ascii_digit(char) and first == "-")
        ):
            result.append(_escape_code_point(char))
            continue

        if code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            result.append(char)
            continue

        result.append("\\" + char)

    return "".join(result)


def _decode_escape(match: re.Match[str]) -> str:
    hex_digits, literal = match.group(1), match.group(2)
    if hex_digits is None:
        return literal

    code = int(hex_digits, 16)
    if code == 0 or code > _MAX_CODE_POINT or 0xD800 <= code <= 0xDFFF:
        return _REPLACEMENT_CHARACTER
    return chr(code)


def css_unescape(escaped: str) -> str:
    """Decode CSS escape sequences back into raw text.

    Recognizes ``\\`` followed by 1-6 hex digits (plus one optional trailing
    whitespace character) and ``\\`` followed by any other single character.
    """
    return _ESCAPE_PATTERN.sub(_decode_escape, escaped)
