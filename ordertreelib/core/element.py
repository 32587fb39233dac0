"""TreeElement abstraction for OrderTreeLib.

An element is the externally supplied record type stored in an
OrderedTree. The tree treats elements as opaque: it only compares them,
converts them to text for display, and - during a bulk build - asks a
fresh element to populate itself from a RecordStream.
"""

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .stream import RecordStream


class TreeElement(ABC):
    """Abstract base class for elements stored in an OrderedTree.

    Subclasses provide a sort key and a parser. Equality, ordering and
    hashing are all derived from the sort key, so two elements with the
    same key are considered the same element by the tree.

    The tree never constructs elements itself; bulk builds obtain fresh,
    unpopulated candidates from an element factory (usually the subclass).
    """

    @abstractmethod
    def sort_key(self) -> Any:
        """Return the value this element is ordered and compared by.

        Returns:
            Any value supporting ==, < and > against keys of the same
            element type
        """
        pass

    @abstractmethod
    def parse_record(self, stream: "RecordStream") -> bool:
        """Populate this element from the next record in the stream.

        Implementations read whatever they need from the stream and
        report whether the record was valid. Reaching end-of-input is
        signalled by the stream itself (stream.eof), not by the return
        value.

        Args:
            stream: Sequential record source

        Returns:
            True if this element now holds a valid record
        """
        pass

    def release(self) -> None:
        """Called when the tree (or a bulk build) gives up this element.

        Elements that hold external resources override this to free them.
        """
        pass

    def __str__(self) -> str:
        """Text shown by OrderedTree.display()."""
        return str(self.sort_key())

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(key={self.sort_key()!r})"

    def __eq__(self, other: object) -> bool:
        """Elements are equal if they have the same sort key."""
        if not isinstance(other, TreeElement):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TreeElement):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TreeElement):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TreeElement):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TreeElement):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __hash__(self) -> int:
        """Hash based on sort key for use in sets and dicts."""
        return hash(self.sort_key())
