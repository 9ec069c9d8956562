from __future__ import annotations

from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class ExternalIterator(Protocol):
    """External iteration protocol: rewind -> valid/current/key -> next."""

    def rewind(self) -> None: ...

    def valid(self) -> bool: ...

    def current(self) -> Any: ...

    def key(self) -> int: ...

    def next(self) -> None: ...


def iterate_values(it: ExternalIterator) -> Iterator[Any]:
    it.rewind()
    while it.valid():
        yield it.current()
        it.next()


def iterate_items(it: ExternalIterator) -> Iterator[tuple[int, Any]]:
    it.rewind()
    while it.valid():
        yield it.key(), it.current()
        it.next()
