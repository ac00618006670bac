"""
Token Types and Lexical Tables
==============================

Token Classes
-------------
| Class              | Tag  | Example          |
|--------------------|------|------------------|
| Identifier         | IDEN | count, _tmp1     |
| Reserved word      | REWD | while, return    |
| Integer            | INTE | 42, 0x1F, 017    |
| Float              | FLOT | 3.14, .5, 1.e+3  |
| Char literal       | CHAR | 'a', '\\n'        |
| String literal     | STR  | "hello"          |
| Operator           | OPER | +=, ->, ?        |
| Special symbol     | SPEC | { } ( ) ;        |
| Single-line comment| SC   | // note           |
| Multi-line comment | MC   | /* note */       |
| Preprocessor       | PREP | #include <x.h>   |

The keyword and operator tables are ordered. The scanner tries entries
in table order, so the order decides which of two overlapping matches
wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Token Class Enumeration
# =============================================================================

class TokenClass(Enum):
    """
    Lexical class of a token.

    The value of each member is the tag used in the token listing.
    """

    IDENTIFIER = "IDEN"
    RESERVED_WORD = "REWD"
    INTEGER = "INTE"
    FLOAT = "FLOT"
    CHAR_LITERAL = "CHAR"
    STRING_LITERAL = "STR"
    OPERATOR = "OPER"
    SPECIAL_SYMBOL = "SPEC"
    SINGLE_LINE_COMMENT = "SC"
    MULTI_LINE_COMMENT = "MC"
    PREPROCESSOR = "PREP"

    @property
    def tag(self) -> str:
        """Short tag written to the token listing."""
        return self.value


# =============================================================================
# Lexical Tables
# =============================================================================

# Matched by reading exactly len(word) characters, in this order.
RESERVED_WORDS: tuple[str, ...] = (
    "if", "else", "while", "for", "do", "switch", "case", "default",
    "continue", "int", "float", "double", "char", "break", "static",
    "extern", "auto", "register", "sizeof", "union", "struct", "enum",
    "return", "goto", "const",
)

# Two-character operators come first so they win over their prefixes.
OPERATORS: tuple[str, ...] = (
    ">>", "<<", "++", "--", "+=", "-=", "*=", "/=", "%=", "&&", "||",
    "->", "==", ">=", "<=", "!=",
    "+", "-", "*", "/", "=", ",", "%", "!", "&", "[", "]", "|", "^",
    ".", ">", "<", ":", "?",
)

SPECIAL_SYMBOLS = frozenset("{}();")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token committed by a recognizer.

    Attributes:
        line_number: Line the scanner was on when recognition started
            (``end_line`` gives the line the lexeme ends on)
        token_class: The TokenClass classification
        text: Payload (decoded literal, comment body, operator spelling...)
        lexeme: Exact source text the recognizer consumed
        error: Description for malformed constructs, otherwise None
    """
    line_number: int
    token_class: TokenClass
    text: str
    lexeme: str
    error: Optional[str] = None

    def __repr__(self) -> str:
        if self.error:
            return (
                f"Token({self.token_class.tag}, {self.text!r}, "
                f"line {self.line_number}, error={self.error!r})"
            )
        return f"Token({self.token_class.tag}, {self.text!r}, line {self.line_number})"

    @property
    def is_error(self) -> bool:
        """Return True if this token was committed with an error note."""
        return self.error is not None

    @property
    def end_line(self) -> int:
        """
        Line on which the lexeme ends.

        Counted from the CR and LF characters inside the lexeme, the same
        way the scanner counts them between tokens.
        """
        breaks = self.lexeme.count("\r") + self.lexeme.count("\n")
        return self.line_number + breaks
