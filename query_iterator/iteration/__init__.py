from .mapped import MappedIterator
from .query_iterator import QueryIterator
from .state import UNBOOTED, ChunkState, Loaded, Unbooted

__all__ = [
    "MappedIterator",
    "QueryIterator",
    "ChunkState",
    "Loaded",
    "Unbooted",
    "UNBOOTED",
]
