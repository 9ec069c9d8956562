from .memory import SequenceRecordSource
from .resolve import resolve_source
from .sql_select import SelectRecordSource
from .sql_text import TextQueryRecordSource

__all__ = [
    "SequenceRecordSource",
    "SelectRecordSource",
    "TextQueryRecordSource",
    "resolve_source",
]
