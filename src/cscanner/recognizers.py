"""
Token Recognizers
=================

Each recognizer is a function ``(cursor, line_number) -> Token | None``.
On success the cursor sits right after the consumed lexeme. On failure
every character the recognizer read has been pushed back, so the cursor
is exactly where it was on entry.

Malformed but recognizable constructs (an unterminated string, a comment
that never closes, an ``#include`` without its closing ``>``) still
commit a token, with a short description in ``Token.error``. This keeps
the scanner moving and stops later recognizers from re-reading the same
characters as operators.

Dispatch Order
--------------
DISPATCH_ORDER lists the recognizers in the order the scanner tries
them. The order is load-bearing:

- comments and directives before operators (``/`` and ``#``)
- reserved words before identifiers (``while``)
- floats before operators and integers (``.5``, ``-1.0``, ``3.14``)

Reserved words are matched by comparing the next ``len(word)``
characters, without checking what follows, so ``iffy`` scans as the
reserved word ``if`` followed by the identifier ``fy``.
"""

from typing import Callable, Optional

from cscanner.characters import (
    decode_escape,
    is_digit,
    is_hex_digit,
    is_identifier_char,
    is_identifier_start,
    is_newline,
    is_octal_digit,
    is_whitespace,
)
from cscanner.cursor import EOF, Cursor
from cscanner.tokens import (
    OPERATORS,
    RESERVED_WORDS,
    SPECIAL_SYMBOLS,
    Token,
    TokenClass,
)


Recognizer = Callable[[Cursor, int], Optional[Token]]


# =============================================================================
# Recognition Attempt
# =============================================================================

class _Attempt:
    """
    Tracks the characters one recognizer has read from the cursor.

    Everything read through the attempt can be handed back, either the
    last few characters (backtrack) or all of them (abort).
    """

    def __init__(self, cursor: Cursor):
        self.cursor = cursor
        self.chars: list[str] = []

    def peek(self) -> str:
        return self.cursor.peek()

    def read(self) -> str:
        char = self.cursor.read()
        if char != EOF:
            self.chars.append(char)
        return char

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Read characters while they satisfy predicate; return them."""
        start = len(self.chars)
        while predicate(self.peek()):
            self.read()
        return "".join(self.chars[start:])

    def match(self, expected: str) -> bool:
        """
        Consume ``expected`` if the input continues with it.

        Reads exactly len(expected) characters and pushes them back on
        mismatch.
        """
        found = self.cursor.read_many(len(expected))
        if found == expected:
            self.chars.extend(found)
            return True
        self.cursor.unread(found)
        return False

    def backtrack(self, count: int) -> None:
        """Push the last ``count`` characters back to the cursor."""
        if count <= 0:
            return
        returned = self.chars[-count:]
        del self.chars[-count:]
        self.cursor.unread(returned)

    def abort(self) -> None:
        """Push back everything and report no match."""
        self.backtrack(len(self.chars))
        return None

    @property
    def lexeme(self) -> str:
        return "".join(self.chars)

    def commit(
        self,
        line_number: int,
        token_class: TokenClass,
        text: str,
        error: Optional[str] = None,
    ) -> Token:
        return Token(
            line_number=line_number,
            token_class=token_class,
            text=text,
            lexeme=self.lexeme,
            error=error,
        )


def _is_blank(char: str) -> bool:
    """Whitespace that does not end a line."""
    return is_whitespace(char) and not is_newline(char)


def _is_line_content(char: str) -> bool:
    return char != EOF and not is_newline(char)


# =============================================================================
# Comments
# =============================================================================

def recognize_single_line_comment(cursor: Cursor, line_number: int) -> Optional[Token]:
    """``// ...`` up to, but not including, the end of the line."""
    attempt = _Attempt(cursor)
    if not attempt.match("//"):
        return None

    body = attempt.read_while(_is_line_content)
    return attempt.commit(line_number, TokenClass.SINGLE_LINE_COMMENT, body)


def recognize_multi_line_comment(cursor: Cursor, line_number: int) -> Optional[Token]:
    """
    ``/* ... */``.

    A comment still open at end of input is committed with an error so
    the scan can finish normally.
    """
    attempt = _Attempt(cursor)
    if not attempt.match("/*"):
        return None

    while True:
        char = attempt.read()
        if char == EOF:
            return attempt.commit(
                line_number, TokenClass.MULTI_LINE_COMMENT, "", error="missing */"
            )
        if char == "*" and attempt.peek() == "/":
            attempt.read()
            return attempt.commit(line_number, TokenClass.MULTI_LINE_COMMENT, "")


# =============================================================================
# Preprocessor Directives
# =============================================================================

def recognize_preprocessor(cursor: Cursor, line_number: int) -> Optional[Token]:
    """
    ``#include <file>`` or ``#include "file"``, echoed as written.

    Only a missing ``include`` word means "not a directive". Once the
    word has been seen, every later problem commits an error-annotated
    PREP token covering the rest of the line.
    """
    attempt = _Attempt(cursor)
    if attempt.peek() != "#":
        return None
    attempt.read()
    attempt.read_while(_is_blank)

    if not attempt.match("include"):
        return attempt.abort()

    def malformed(error: str) -> Token:
        attempt.read_while(_is_line_content)
        return attempt.commit(
            line_number, TokenClass.PREPROCESSOR, attempt.lexeme, error=error
        )

    if is_identifier_char(attempt.peek()):
        return malformed("unknown directive")

    attempt.read_while(_is_blank)
    opening = attempt.peek()
    if opening == "<":
        closing = ">"
    elif opening == '"':
        closing = '"'
    else:
        return malformed('missing < or "')
    attempt.read()

    while True:
        char = attempt.peek()
        if not _is_line_content(char):
            return attempt.commit(
                line_number,
                TokenClass.PREPROCESSOR,
                attempt.lexeme,
                error=f"missing {closing}",
            )
        attempt.read()
        if char == closing:
            return attempt.commit(line_number, TokenClass.PREPROCESSOR, attempt.lexeme)


# =============================================================================
# Symbols and Words
# =============================================================================

def recognize_special_symbol(cursor: Cursor, line_number: int) -> Optional[Token]:
    """One of ``{ } ( ) ;``."""
    if cursor.peek() not in SPECIAL_SYMBOLS:
        return None
    attempt = _Attempt(cursor)
    symbol = attempt.read()
    return attempt.commit(line_number, TokenClass.SPECIAL_SYMBOL, symbol)


def recognize_reserved_word(cursor: Cursor, line_number: int) -> Optional[Token]:
    attempt = _Attempt(cursor)
    for word in RESERVED_WORDS:
        if attempt.match(word):
            return attempt.commit(line_number, TokenClass.RESERVED_WORD, word)
    return None


def recognize_operator(cursor: Cursor, line_number: int) -> Optional[Token]:
    """First entry of OPERATORS the input starts with (longest first)."""
    attempt = _Attempt(cursor)
    for operator in OPERATORS:
        if attempt.match(operator):
            return attempt.commit(line_number, TokenClass.OPERATOR, operator)
    return None


def recognize_identifier(cursor: Cursor, line_number: int) -> Optional[Token]:
    """``[A-Za-z_][A-Za-z0-9_]*``, maximal munch."""
    if not is_identifier_start(cursor.peek()):
        return None
    attempt = _Attempt(cursor)
    name = attempt.read_while(is_identifier_char)
    return attempt.commit(line_number, TokenClass.IDENTIFIER, name)


# =============================================================================
# Character and String Literals
# =============================================================================

def _read_quoted(attempt: _Attempt, quote: str) -> tuple[str, bool]:
    """
    Read literal content after the opening quote.

    Escapes are decoded. A backslash before a newline continues the
    literal on the next line, skipping the line break and any whitespace
    after it. Stops before a bare newline.

    Returns:
        (decoded content, whether the closing quote was found)
    """
    content = []
    while True:
        char = attempt.peek()
        if not _is_line_content(char):
            return "".join(content), False
        attempt.read()

        if char == quote:
            return "".join(content), True

        if char != "\\":
            content.append(char)
            continue

        escaped = attempt.peek()
        if is_newline(escaped):
            attempt.read_while(is_whitespace)
        elif escaped == EOF:
            content.append(char)
        else:
            attempt.read()
            content.append(decode_escape(escaped))


def recognize_char_literal(cursor: Cursor, line_number: int) -> Optional[Token]:
    attempt = _Attempt(cursor)
    if not attempt.match("'"):
        return None

    content, closed = _read_quoted(attempt, "'")
    if not closed:
        error = "missing '"
    elif not content:
        error = "empty character constant"
    else:
        error = None
    return attempt.commit(line_number, TokenClass.CHAR_LITERAL, content, error=error)


def recognize_string_literal(cursor: Cursor, line_number: int) -> Optional[Token]:
    attempt = _Attempt(cursor)
    if not attempt.match('"'):
        return None

    content, closed = _read_quoted(attempt, '"')
    error = None if closed else 'missing "'
    return attempt.commit(line_number, TokenClass.STRING_LITERAL, content, error=error)


# =============================================================================
# Numbers
# =============================================================================

def recognize_float(cursor: Cursor, line_number: int) -> Optional[Token]:
    """
    ``[+-]? (D+ '.' D* | D* '.' D+) ([eE] [+-]? D+)?``

    Without a ``.`` the whole read is undone, leaving digits for the
    integer recognizer. An exponent marker with no digits after it is
    pushed back with its sign: ``3.e`` commits ``3.``.
    """
    attempt = _Attempt(cursor)
    if attempt.peek() in ("+", "-"):
        attempt.read()

    whole = attempt.read_while(is_digit)
    if attempt.peek() != ".":
        return attempt.abort()
    attempt.read()
    fraction = attempt.read_while(is_digit)
    if not whole and not fraction:
        return attempt.abort()

    if attempt.peek() in ("e", "E"):
        mark = len(attempt.chars)
        attempt.read()
        if attempt.peek() in ("+", "-"):
            attempt.read()
        if not attempt.read_while(is_digit):
            attempt.backtrack(len(attempt.chars) - mark)

    return attempt.commit(line_number, TokenClass.FLOAT, attempt.lexeme)


def recognize_integer(cursor: Cursor, line_number: int) -> Optional[Token]:
    """
    Decimal, octal (``0`` prefix) or hexadecimal (``0x`` prefix) integer.

    ``0x`` with no hex digit after it commits ``0`` and leaves the ``x``.
    """
    first = cursor.peek()
    if not is_digit(first):
        return None
    attempt = _Attempt(cursor)
    attempt.read()

    if first != "0":
        attempt.read_while(is_digit)
    elif attempt.peek() in ("x", "X"):
        attempt.read()
        if not attempt.read_while(is_hex_digit):
            attempt.backtrack(1)
    else:
        attempt.read_while(is_octal_digit)

    return attempt.commit(line_number, TokenClass.INTEGER, attempt.lexeme)


# =============================================================================
# Dispatch Order
# =============================================================================

DISPATCH_ORDER: tuple[Recognizer, ...] = (
    recognize_single_line_comment,
    recognize_multi_line_comment,
    recognize_preprocessor,
    recognize_special_symbol,
    recognize_reserved_word,
    recognize_char_literal,
    recognize_string_literal,
    recognize_float,
    recognize_operator,
    recognize_identifier,
    recognize_integer,
)
