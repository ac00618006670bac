"""
Token listing output.

Each token becomes one line, ``<CLASS>: <payload>``:

    REWD: int
    IDEN: main
    SC:  entry point
    MC: ERROR: missing */

Payload characters below 0x20 (decoded escapes in literals) and the
backslash itself are written back in escaped form, so a token never spans
more than one line and two different payloads never print the same.

With line numbers, a token whose lexeme crosses line breaks is prefixed
by its line range (``1-3``) instead of a single line.
"""

from typing import Iterable, TextIO

from cscanner.tokens import Token


# Characters with a named escaped spelling in the listing.
_ESCAPES = {
    "\\": "\\\\",
    "\x07": "\\a",
    "\x08": "\\b",
    "\x09": "\\t",
    "\x0a": "\\n",
    "\x0b": "\\v",
    "\x0c": "\\f",
    "\x0d": "\\r",
    "\x1b": "\\e",
}


def escape_payload(text: str) -> str:
    """Escape backslashes and control characters in a token payload."""
    chars = []
    for char in text:
        if char in _ESCAPES:
            chars.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\x{ord(char):02x}")
        else:
            chars.append(char)
    return "".join(chars)


def format_token(token: Token, line_numbers: bool = False) -> str:
    """
    Render one token as a listing line (without the trailing newline).

    An error note follows the payload, or replaces it when the payload is
    empty. With ``line_numbers`` the line is prefixed by ``<line>\\t``, or
    ``<first>-<last>\\t`` for a token spanning several lines.
    """
    payload = escape_payload(token.text)
    if token.error:
        note = f"ERROR: {token.error}"
        payload = f"{payload} {note}" if payload else note

    line = f"{token.token_class.tag}: {payload}"
    if line_numbers:
        span = str(token.line_number)
        if token.end_line != token.line_number:
            span = f"{span}-{token.end_line}"
        line = f"{span}\t{line}"
    return line


class TokenWriter:
    """
    Append-only token sink writing one line per token.

    Attributes:
        token_count: Tokens written so far
        error_count: Error-annotated tokens written so far
    """

    def __init__(self, stream: TextIO, line_numbers: bool = False):
        self.stream = stream
        self.line_numbers = line_numbers
        self.token_count = 0
        self.error_count = 0

    def write(self, token: Token) -> None:
        self.stream.write(format_token(token, self.line_numbers) + "\n")
        self.token_count += 1
        if token.is_error:
            self.error_count += 1

    def write_all(self, tokens: Iterable[Token]) -> int:
        """Write every token; return how many were written."""
        start = self.token_count
        for token in tokens:
            self.write(token)
        return self.token_count - start
