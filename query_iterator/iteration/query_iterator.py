from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Iterator, Sequence

from query_iterator.config.settings import IteratorConfig
from query_iterator.core.constants import LOGGER_NAME
from query_iterator.core.exceptions import InvalidArgumentError, ReadOnlyIteratorError
from query_iterator.iteration.mapped import MappedIterator
from query_iterator.iteration.state import UNBOOTED, ChunkState, Loaded, next_chunk_index
from query_iterator.ports.iteration import iterate_items, iterate_values
from query_iterator.ports.source import Record, RecordSource

logger = logging.getLogger(LOGGER_NAME)


class QueryIterator:
    """
    Lazy, read-only sequence over a RecordSource.

    Records are fetched page by page ("chunks" of `chunk_size`); only the chunk covering
    the requested position is kept in memory. Supports the external iteration protocol
    (rewind/valid/current/key/next), plain `for` loops, random access by global position
    and `map()` for lazy value transformation.

    Not thread-safe: cursor and chunk state are unprotected.
    """

    def __init__(
        self,
        source: RecordSource,
        chunk_size: int | None = None,
        *,
        config: IteratorConfig | None = None,
    ) -> None:
        if not isinstance(source, RecordSource):
            raise InvalidArgumentError(
                "QueryIterator expects a RecordSource "
                f"(fetch_page/count/first/fetch_all). {type(source).__name__!r} received."
            )

        cfg = config if config is not None else IteratorConfig()
        size = cfg.default_chunk_size if chunk_size is None else chunk_size

        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidArgumentError(f"chunk_size must be a positive int, got {size!r}")

        self._source = source
        self._chunk_size: int = size

        self._state: ChunkState = UNBOOTED
        self._chunk: list[Record] = []
        self._cursor = 0

    # ----------------------------
    # accessors
    # ----------------------------

    @property
    def source(self) -> RecordSource:
        return self._source

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def state(self) -> ChunkState:
        return self._state

    @property
    def chunk_index(self) -> int | None:
        return self._state.index if isinstance(self._state, Loaded) else None

    @property
    def cursor(self) -> int:
        return self._cursor

    def is_booted(self) -> bool:
        return isinstance(self._state, Loaded)

    def get_chunk(self) -> tuple[Record, ...]:
        self._boot_if_not_booted()
        return tuple(self._chunk)

    # ----------------------------
    # external iteration
    # ----------------------------

    def rewind(self) -> None:
        self._chunk = []
        self._cursor = 0
        self._state = UNBOOTED

    def valid(self) -> bool:
        # end of source is only known once a chunk has been fetched
        self._boot_if_not_booted()
        return not self.reached_end()

    def current(self) -> Record | None:
        return self.get(self.key())

    def key(self) -> int:
        return self._chunk_start() + self._cursor

    def next(self) -> None:
        if self._should_load_next_chunk():
            self._load_next_chunk()
        elif not self.reached_end():
            # past the end the cursor stays at len(chunk)
            self._cursor += 1

    def reached_end(self) -> bool:
        """
        True once the cursor moved past the last record of a short (final) chunk.

        A full chunk never ends iteration by itself: the following chunk has to be
        fetched to find out whether the source is exhausted. An empty chunk is
        exhausted regardless of the cursor.
        """
        if not self.is_booted():
            return False

        length = len(self._chunk)
        if length == 0:
            return True

        return length < self._chunk_size and self._cursor > length - 1

    # ----------------------------
    # random access
    # ----------------------------

    def get(self, position: int, default: Any = None) -> Record | Any:
        position = operator.index(position)
        if position < 0:
            return default

        target = position // self._chunk_size
        self.load_chunk(target)

        offset = position - target * self._chunk_size
        if offset < len(self._chunk):
            return self._chunk[offset]
        return default

    def is_loaded(self, position: int) -> bool:
        """Позиция в загруженном чанке и не дальше курсора (уже пройдена)."""
        if not self.is_booted() or not self._chunk:
            return False

        start = self._chunk_start()
        last = min(self._cursor, len(self._chunk) - 1)
        return start <= position <= start + last

    def exists(self, position: int) -> bool:
        return self.is_loaded(position) or 0 <= position < self.count()

    def load_chunk(self, index: int) -> None:
        if index < 0:
            raise InvalidArgumentError(f"chunk index must be >= 0, got {index!r}")

        if isinstance(self._state, Loaded) and self._state.index == index:
            return

        page = index + 1
        # fetch first: a failing source leaves the current chunk untouched
        records = list(self._source.fetch_page(page, self._chunk_size))

        self._state = Loaded(index)
        self._chunk = records
        self._cursor = 0

        logger.debug(
            "chunk loaded index=%d page=%d per_page=%d fetched=%d",
            index,
            page,
            self._chunk_size,
            len(records),
        )

    # ----------------------------
    # source delegation
    # ----------------------------

    def count(self) -> int:
        return int(self._source.count())

    def all(self) -> list[Record]:
        return list(self._source.fetch_all())

    def to_list(self) -> list[Record]:
        return self.all()

    def first(self, columns: Sequence[str] | None = None) -> Record | None:
        return self._source.first(columns)

    def map(self, transform: Callable[[Any], Any]) -> MappedIterator:
        return MappedIterator(self, transform)

    # ----------------------------
    # python protocols
    # ----------------------------

    def __iter__(self) -> Iterator[Record]:
        return iterate_values(self)

    def items(self) -> Iterator[tuple[int, Record]]:
        return iterate_items(self)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        # truth testing must not fall back to __len__ (a COUNT query)
        return True

    def __getitem__(self, position: int) -> Record | None:
        if isinstance(position, slice):
            raise TypeError("QueryIterator does not support slicing")
        return self.get(position)

    def __setitem__(self, position: int, value: Any) -> None:
        raise ReadOnlyIteratorError(
            f"Cannot set position {position!r} on read only {type(self).__name__}"
        )

    def __delitem__(self, position: int) -> None:
        raise ReadOnlyIteratorError(
            f"Cannot unset position {position!r} on read only {type(self).__name__}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(chunk_size={self._chunk_size}, "
            f"state={self._state!r}, cursor={self._cursor})"
        )

    # ----------------------------
    # internals
    # ----------------------------

    def _chunk_start(self) -> int:
        index = self._state.index if isinstance(self._state, Loaded) else 0
        return index * self._chunk_size

    def _should_load_next_chunk(self) -> bool:
        if not self.is_booted():
            return True
        return not self.reached_end() and self._cursor + 1 >= self._chunk_size

    def _load_next_chunk(self) -> None:
        self.load_chunk(next_chunk_index(self._state))

    def _boot_if_not_booted(self) -> None:
        if not self.is_booted():
            self._load_next_chunk()
