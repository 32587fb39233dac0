"""Ready-made element types for common record formats."""

from .numeric import IntegerRecord, KeyedRecord
from .text import WordRecord, LineRecord

__all__ = [
    'IntegerRecord',
    'KeyedRecord',
    'WordRecord',
    'LineRecord',
]
