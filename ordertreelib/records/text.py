"""Text record types for OrderTreeLib."""

from typing import Optional

from ..core.element import TreeElement
from ..core.stream import RecordStream


class WordRecord(TreeElement):
    """An element holding one whitespace-delimited word.

    With casefold=True words are ordered and compared case-insensitively
    (so 'Apple' and 'apple' are duplicates) while str() keeps the
    spelling that was read.
    """

    def __init__(self, word: Optional[str] = None, casefold: bool = False):
        """Initialize record.

        Args:
            word: The word (None for an unpopulated candidate)
            casefold: Compare case-insensitively
        """
        self.word = word
        self.casefold = casefold

    def sort_key(self) -> Optional[str]:
        if self.word is None or not self.casefold:
            return self.word
        return self.word.casefold()

    def parse_record(self, stream: RecordStream) -> bool:
        """Read one token."""
        token = stream.read_token()
        if token is None:
            return False
        self.word = token
        return True

    def __str__(self) -> str:
        return str(self.word)


class LineRecord(TreeElement):
    """An element holding one whole line, surrounding whitespace stripped.

    Blank lines are not valid records.
    """

    def __init__(self, text: Optional[str] = None):
        self.text = text

    def sort_key(self) -> Optional[str]:
        return self.text

    def parse_record(self, stream: RecordStream) -> bool:
        line = stream.read_line()
        if line is None:
            return False
        line = line.strip()
        if not line:
            return False
        self.text = line
        return True
