"""
C Scanner
=========

This module drives the recognizers over a whole input and turns source
text into a stream of tokens.

Scan Loop
---------
The scanner alternates between two states:

1. skip-whitespace: consume spaces, tabs and line breaks, counting
   every CR and every LF as a new line (CRLF counts twice)
2. recognize: try each recognizer in DISPATCH_ORDER until one commits

End of input seen while skipping whitespace ends the scan. A character
that no recognizer accepts is consumed on its own, recorded as an
InvalidCharacterError in ``scanner.diagnostics``, and scanning resumes
with the next character.

The line counter only moves while whitespace is being skipped. Line
breaks inside a committed token (a multi-line comment, a continued
string) do not advance it.

Example Usage
-------------
>>> from cscanner.scanner import Scanner
>>> scanner = Scanner("int x = 0x1F;\\n", "demo.c")
>>> for token in scanner.tokenize():
...     print(token.token_class.tag, token.text)
REWD int
IDEN x
OPER =
INTE 0x1F
SPEC ;
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO, Union

from cscanner.characters import is_newline, is_whitespace
from cscanner.cursor import EOF, Cursor
from cscanner.errors import DiagnosticCollector, InvalidCharacterError, SourceLocation
from cscanner.recognizers import DISPATCH_ORDER, Recognizer
from cscanner.tokens import Token

logger = logging.getLogger(__name__)

# One character per byte, every byte value decodes.
SOURCE_ENCODING = "latin-1"


@dataclass
class ScannerState:
    """Mutable per-scan state threaded through the scan loop."""
    line_number: int = 1


# =============================================================================
# Dispatcher
# =============================================================================

class Dispatcher:
    """
    Tries recognizers in a fixed priority order.

    The first recognizer that commits wins; failed recognizers leave the
    cursor untouched, so the next one starts from the same place.
    """

    def __init__(self, recognizers: Sequence[Recognizer] = DISPATCH_ORDER):
        self.recognizers = tuple(recognizers)

    def dispatch(self, cursor: Cursor, line_number: int) -> Optional[Token]:
        """
        Recognize one token at the cursor.

        Returns:
            The committed token, or None if no recognizer matches
        """
        for recognizer in self.recognizers:
            token = recognizer(cursor, line_number)
            if token is not None:
                return token
        return None


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Tokenizes C-like source text.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = list(scanner.tokenize())
        if scanner.diagnostics.has_errors():
            print(scanner.diagnostics.report())

    Attributes:
        filename: Name of the source (for diagnostics)
        state: ScannerState holding the current line number
        diagnostics: Unrecognized characters found so far
        skipped: Whitespace and unrecognized characters consumed between
            tokens, in input order, when ``keep_skipped`` is set
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        filename: str = "<input>",
        line_number: int = 1,
        dispatcher: Optional[Dispatcher] = None,
        keep_skipped: bool = False,
    ):
        """
        Initialize the scanner.

        Args:
            source: Source text or a readable text stream
            filename: Name of the source file (for diagnostics)
            line_number: Line number of the first line
            dispatcher: Recognizer dispatcher (default priority order)
            keep_skipped: Record the text consumed between tokens in
                ``skipped``
        """
        self.cursor = Cursor(source)
        self.filename = filename
        self.state = ScannerState(line_number=line_number)
        self.dispatcher = dispatcher or Dispatcher()
        self.diagnostics = DiagnosticCollector()
        self.keep_skipped = keep_skipped
        self.skipped: list[str] = []

    @property
    def line_number(self) -> int:
        return self.state.line_number

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the input is exhausted.

        Yields:
            Token objects in source order
        """
        while self._skip_whitespace():
            token = self.dispatcher.dispatch(self.cursor, self.state.line_number)
            if token is None:
                self._reject_character()
                continue

            logger.debug(
                "%s:%d: %s %r",
                self.filename,
                token.line_number,
                token.token_class.tag,
                token.text,
            )
            yield token

    def _skip_whitespace(self) -> bool:
        """
        Consume whitespace before the next token.

        Returns:
            True if a non-whitespace character follows, False at EOF
        """
        while True:
            char = self.cursor.peek()
            if char == EOF:
                return False
            if not is_whitespace(char):
                return True
            self._consume_skipped()
            if is_newline(char):
                self.state.line_number += 1

    def _reject_character(self) -> None:
        """Consume one unrecognized character and record it."""
        char = self._consume_skipped()
        error = InvalidCharacterError(
            char, SourceLocation(self.filename, self.state.line_number)
        )
        self.diagnostics.add(error)
        logger.info("%s", error)

    def _consume_skipped(self) -> str:
        char = self.cursor.read()
        if self.keep_skipped:
            self.skipped.append(char)
        return char


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: Union[str, TextIO], filename: str = "<input>") -> list[Token]:
    """
    Scan source text and return all tokens.

    Unrecognized characters are skipped; use Scanner directly to inspect
    the diagnostics.
    """
    return list(Scanner(source, filename).tokenize())


def scan_file(path: Union[str, Path]) -> tuple[list[Token], DiagnosticCollector]:
    """
    Scan a source file.

    The file is decoded one byte per character, so any byte sequence
    can be scanned.

    Returns:
        (tokens, diagnostics)

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    with path.open("r", encoding=SOURCE_ENCODING, newline="") as source:
        scanner = Scanner(source, str(path))
        tokens = list(scanner.tokenize())
    return tokens, scanner.diagnostics
