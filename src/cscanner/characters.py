"""
Character classification for the single-byte source model.

Every predicate accepts the cursor's EOF sentinel (the empty string) and
returns False for it.
"""

import string


WHITESPACE = " \t\r\n"
NEWLINES = "\r\n"
ALPHA = string.ascii_letters
DIGITS = string.digits
OCTAL_DIGITS = string.octdigits
HEX_DIGITS = string.hexdigits
IDENT_START = ALPHA + "_"
IDENT_CHARS = ALPHA + DIGITS + "_"

# Characters that follow a backslash and the value they stand for.
ESCAPE_SEQUENCES = {
    "a": "\x07",    # Bell/alert
    "b": "\x08",    # Backspace
    "e": "\x1b",    # Escape (GNU extension)
    "f": "\x0c",    # Form feed
    "n": "\x0a",    # Newline
    "r": "\x0d",    # Carriage return
    "t": "\x09",    # Tab
    "v": "\x0b",    # Vertical tab
    "\\": "\\",     # Backslash
    "'": "'",       # Single quote
    '"': '"',       # Double quote
    "?": "?",       # Question mark
}


def _member(char: str, chars: str) -> bool:
    # `"" in "abc"` is True in Python, so EOF must be ruled out explicitly.
    return len(char) == 1 and char in chars


def is_whitespace(char: str) -> bool:
    return _member(char, WHITESPACE)


def is_newline(char: str) -> bool:
    """CR and LF each count as a newline, so CRLF is two newlines."""
    return _member(char, NEWLINES)


def is_alpha(char: str) -> bool:
    return _member(char, ALPHA)


def is_digit(char: str) -> bool:
    return _member(char, DIGITS)


def is_octal_digit(char: str) -> bool:
    return _member(char, OCTAL_DIGITS)


def is_hex_digit(char: str) -> bool:
    return _member(char, HEX_DIGITS)


def is_underscore(char: str) -> bool:
    return char == "_"


def is_identifier_start(char: str) -> bool:
    return is_alpha(char) or is_underscore(char)


def is_identifier_char(char: str) -> bool:
    return _member(char, IDENT_CHARS)


def decode_escape(char: str) -> str:
    """
    Decode the character that follows a backslash.

    Unknown escapes decode to the character itself.

    >>> decode_escape("n")
    '\\n'
    >>> decode_escape("q")
    'q'
    """
    return ESCAPE_SEQUENCES.get(char, char)
