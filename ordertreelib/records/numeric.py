"""Numeric record types for OrderTreeLib.

Concrete TreeElement implementations for integer data, either bare
integers or integer-keyed lines carrying a payload.
"""

from typing import Optional

from ..core.element import TreeElement
from ..core.stream import RecordStream


class IntegerRecord(TreeElement):
    """An element holding one integer, read as a single token.

    A token that is not a valid integer makes parse_record() return
    False; the token is consumed either way.
    """

    def __init__(self, value: Optional[int] = None):
        """Initialize record.

        Args:
            value: Integer value (None for an unpopulated candidate)
        """
        self.value = value

    def sort_key(self) -> Optional[int]:
        return self.value

    def parse_record(self, stream: RecordStream) -> bool:
        """Read one integer token."""
        token = stream.read_token()
        if token is None:
            return False
        try:
            self.value = int(token)
        except ValueError:
            return False
        return True


class KeyedRecord(TreeElement):
    """A line of the form '<integer key> <payload>'.

    Records are ordered and compared by key only, so a payload-less
    probe (see probe()) retrieves the stored record with its payload.

    Example:
        >>> tree.build_tree(RecordStream.from_text("2 beta\\n1 alpha\\n"), KeyedRecord)
        >>> tree.retrieve(KeyedRecord.probe(2))[1].payload
        'beta'
    """

    def __init__(self, key: Optional[int] = None, payload: str = ""):
        """Initialize record.

        Args:
            key: Integer ordering key (None for an unpopulated candidate)
            payload: Free text carried with the key
        """
        self.key = key
        self.payload = payload

    @classmethod
    def probe(cls, key: int) -> 'KeyedRecord':
        """Create a payload-less record for use as a retrieve() target.

        Args:
            key: Key to look up

        Returns:
            KeyedRecord with an empty payload
        """
        return cls(key)

    def sort_key(self) -> Optional[int]:
        return self.key

    def parse_record(self, stream: RecordStream) -> bool:
        """Read one line and split it into key and payload.

        Blank lines, lines whose first field is not an integer, and the
        end of input all report failure.
        """
        line = stream.read_line()
        if line is None:
            return False

        parts = line.strip().split(None, 1)
        if not parts:
            return False
        try:
            self.key = int(parts[0])
        except ValueError:
            return False
        self.payload = parts[1] if len(parts) > 1 else ""
        return True

    def __str__(self) -> str:
        if self.payload:
            return f"{self.key}: {self.payload}"
        return str(self.key)
