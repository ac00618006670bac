"""
cscanner - Lexical Scanner for C-like Source Text
=================================================

This package converts C source text into a stream of classified tokens,
each tagged with the line it starts on.

Main Components
---------------
- **cursor**: character source with unbounded pushback
- **characters**: character classifiers and escape decoding
- **tokens**: TokenClass, Token and the keyword/operator tables
- **recognizers**: the eleven token recognizers and their dispatch order
- **scanner**: Dispatcher and the scan loop
- **output**: token listing writer
- **cli**: the ``cscan`` command

Quick Start
-----------
    >>> from cscanner import tokenize
    >>> [t.text for t in tokenize("x += 1;")]
    ['x', '+=', '1', ';']

Or use the command-line tool:
    $ cscan hello.c -o hello.tokens
"""

__version__ = "1.0.0"

from cscanner.cursor import EOF, Cursor
from cscanner.errors import (
    CursorError,
    DiagnosticCollector,
    InvalidCharacterError,
    LexicalError,
    ScannerError,
    SourceLocation,
)
from cscanner.output import TokenWriter, format_token
from cscanner.scanner import Dispatcher, Scanner, ScannerState, scan_file, tokenize
from cscanner.tokens import OPERATORS, RESERVED_WORDS, SPECIAL_SYMBOLS, Token, TokenClass

__all__ = [
    "__version__",
    "EOF",
    "Cursor",
    "CursorError",
    "DiagnosticCollector",
    "InvalidCharacterError",
    "LexicalError",
    "ScannerError",
    "SourceLocation",
    "TokenWriter",
    "format_token",
    "Dispatcher",
    "Scanner",
    "ScannerState",
    "scan_file",
    "tokenize",
    "OPERATORS",
    "RESERVED_WORDS",
    "SPECIAL_SYMBOLS",
    "Token",
    "TokenClass",
]
