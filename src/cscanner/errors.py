"""
Scanner Error Hierarchy
=======================

This module defines the exception hierarchy for the C scanner. All
exceptions inherit from ScannerError, allowing callers to catch every
scanner-related error with a single except clause.

Exception Hierarchy
-------------------
ScannerError (base)
├── CursorError - pushback past the start of input
└── LexicalError - lexer-level problems
    └── InvalidCharacterError - character no recognizer accepts

Malformed literals, comments and directives are NOT exceptions: the
scanner commits them as error-annotated tokens and keeps going.
Unrecognized characters are collected as InvalidCharacterError values
by a DiagnosticCollector rather than raised, so a scan always runs to
the end of its input.

Error messages follow this format:
    filename:line: error: description
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line'."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Base Exception Class
# =============================================================================

class ScannerError(Exception):
    """
    Base exception for all scanner errors.

    Prefixes the message with the source location when one is known.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its location.

        Example output:
            main.c:3: error: invalid character '@' (0x40)
        """
        if self.location:
            return f"{self.location}: error: {self.message}"
        return f"error: {self.message}"


class CursorError(ScannerError):
    """
    Invalid cursor operation.

    Raised when more characters are pushed back than were ever read.
    This indicates a bug in a recognizer, not a problem with the input.
    """
    pass


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(ScannerError):
    """Base class for problems found in the scanned text itself."""
    pass


class InvalidCharacterError(LexicalError):
    """
    Character that no recognizer accepts.

    The scanner consumes the character, records one of these and resumes
    with the next character.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
        )


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner keeps going after an unrecognized character; every such
    character is added here so the caller can report them all at once.

    Example:
        scanner = Scanner(source, "main.c")
        tokens = list(scanner.tokenize())
        if scanner.diagnostics.has_errors():
            print(scanner.diagnostics.report())
    """

    def __init__(self):
        self.errors: List[LexicalError] = []

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = [str(error) for error in self.errors]
        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} lexical {error_word}")
        return "\n".join(lines)

    def __iter__(self):
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
