"""Sequential record source for OrderTreeLib.

RecordStream wraps any text file object and hands out whitespace
delimited tokens or whole lines. It is forward-only. Elements use it in
their parse_record() implementations; the bulk build loop looks at the
eof flag and at whether a parse attempt moved the read position.
"""

import io
from typing import Optional, TextIO, Tuple


class RecordStream:
    """Forward-only token/line reader with an end-of-input flag.

    The eof flag is set by a read attempt that finds no more data. A read
    that successfully returns the final record does not set it, so the
    last record of a source without a trailing newline is not lost.

    Example:
        >>> stream = RecordStream.from_text("7 3\\n2")
        >>> stream.read_token(), stream.read_token(), stream.read_token()
        ('7', '3', '2')
        >>> stream.read_token() is None, stream.eof
        (True, True)
    """

    def __init__(self, source: TextIO):
        """Initialize stream over a text source.

        Args:
            source: Any object with a readline() method returning str
        """
        self._source = source
        self._pending: Optional[str] = None  # Unconsumed part of current line
        self._eof = False
        self.line_number = 0

    @classmethod
    def from_text(cls, text: str) -> 'RecordStream':
        """Create a stream over an in-memory string.

        Args:
            text: Records to read

        Returns:
            RecordStream positioned at the start of text
        """
        return cls(io.StringIO(text))

    @property
    def eof(self) -> bool:
        """True once a read attempt ran past the end of the source."""
        return self._eof

    @property
    def position(self) -> Tuple[int, Optional[int], bool]:
        """Opaque read position; changes whenever anything is consumed.

        Compare two positions to tell whether a parse attempt advanced.
        """
        pending = len(self._pending) if self._pending is not None else None
        return (self.line_number, pending, self._eof)

    @property
    def source(self) -> TextIO:
        """The wrapped text source."""
        return self._source

    def read_token(self) -> Optional[str]:
        """Read the next whitespace-delimited token.

        Tokens may span to following lines; blank lines are skipped.

        Returns:
            The token, or None (and eof set) if the source is exhausted
        """
        while True:
            if self._pending is None:
                line = self._next_line()
                if line is None:
                    return None
                self._pending = line

            stripped = self._pending.lstrip()
            if not stripped:
                self._pending = None
                continue

            parts = stripped.split(None, 1)
            token = parts[0]
            # Keep the remainder (possibly empty) so read_line() sees it
            self._pending = parts[1] if len(parts) > 1 else ""
            return token

    def read_line(self) -> Optional[str]:
        """Read the rest of the current line, or the next full line.

        If a token was read from the current line, the remainder of that
        line is returned (possibly an empty string).

        Returns:
            Line content without its newline, or None (and eof set)
        """
        if self._pending is not None:
            rest = self._pending
            self._pending = None
            return rest
        return self._next_line()

    def _next_line(self) -> Optional[str]:
        """Pull one physical line from the source."""
        if self._eof:
            return None
        line = self._source.readline()
        if line == "":
            self._eof = True
            return None
        self.line_number += 1
        return line.rstrip("\r\n")

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(line={self.line_number}, eof={self._eof})"
