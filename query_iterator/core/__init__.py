from __future__ import annotations

from .exceptions import InvalidArgumentError, QueryIteratorError, ReadOnlyIteratorError
from .constants import DEFAULT_CHUNK_SIZE

__all__ = [
    "InvalidArgumentError",
    "QueryIteratorError",
    "ReadOnlyIteratorError",
    "DEFAULT_CHUNK_SIZE",
]
