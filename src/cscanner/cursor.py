"""
Character Cursor
================

The Cursor is the character source every recognizer reads from. It wraps
a text stream and adds unbounded pushback: any sequence of previously
read characters can be returned to the front of the input, and later
reads reproduce it in the original order.

Recognizers read ahead several characters (``include`` after ``#``, a
two-character operator, a keyword) and must undo the whole read when
the match fails. A one-character ``ungetc`` is not enough for that, so
the Cursor keeps its own deque of pending characters and drains it
before touching the underlying stream.

Example Usage
-------------
>>> cursor = Cursor("int x;")
>>> cursor.read() + cursor.read() + cursor.read()
'int'
>>> cursor.unread("int")
>>> cursor.peek()
'i'
>>> cursor.position
0
"""

import io
from collections import deque
from typing import Iterable, TextIO, Union

from cscanner.errors import CursorError


# End of input. The empty string never equals a real one-character read.
EOF = ""


class Cursor:
    """
    Position-addressable character source with multi-character pushback.

    Attributes:
        position: Characters consumed so far, net of pushback
    """

    def __init__(self, source: Union[str, TextIO]):
        """
        Initialize the cursor.

        Args:
            source: Source text, or a readable text stream. Strings are
                wrapped in io.StringIO.
        """
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self._pending: deque[str] = deque()
        self.position = 0

    def peek(self) -> str:
        """Return the next character without consuming it (EOF at end)."""
        if not self._pending:
            char = self._stream.read(1)
            if char == EOF:
                return EOF
            self._pending.append(char)
        return self._pending[0]

    def read(self) -> str:
        """Consume and return the next character (EOF at end)."""
        if self._pending:
            char = self._pending.popleft()
        else:
            char = self._stream.read(1)
            if char == EOF:
                return EOF
        self.position += 1
        return char

    def read_many(self, count: int) -> str:
        """
        Read up to ``count`` characters.

        Returns fewer characters only when the input ends first.
        """
        chars = []
        for _ in range(count):
            char = self.read()
            if char == EOF:
                break
            chars.append(char)
        return "".join(chars)

    def unread(self, chars: Iterable[str]) -> None:
        """
        Push characters back so the next reads return them in order.

        Args:
            chars: Previously read characters, in the order they were read

        Raises:
            CursorError: If more characters are pushed back than were read
        """
        chars = "".join(chars)
        if len(chars) > self.position:
            raise CursorError(
                f"cannot push back {len(chars)} characters at position {self.position}"
            )
        self._pending.extendleft(reversed(chars))
        self.position -= len(chars)

    def at_end(self) -> bool:
        """Check if all input has been consumed."""
        return self.peek() == EOF
