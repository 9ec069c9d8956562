from .adapters import SelectRecordSource, SequenceRecordSource, TextQueryRecordSource, resolve_source
from .config import IteratorConfig, Settings, get_settings
from .core import InvalidArgumentError, QueryIteratorError, ReadOnlyIteratorError
from .iteration import MappedIterator, QueryIterator
from .ports import ExternalIterator, RecordSource
from .services.iterators import to_iterator

__all__ = [
    "ExternalIterator",
    "InvalidArgumentError",
    "IteratorConfig",
    "MappedIterator",
    "QueryIterator",
    "QueryIteratorError",
    "ReadOnlyIteratorError",
    "RecordSource",
    "SelectRecordSource",
    "SequenceRecordSource",
    "Settings",
    "TextQueryRecordSource",
    "get_settings",
    "resolve_source",
    "to_iterator",
]
