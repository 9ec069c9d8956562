from .iteration import ExternalIterator
from .source import Record, RecordSource

__all__ = [
    "ExternalIterator",
    "Record",
    "RecordSource",
]
