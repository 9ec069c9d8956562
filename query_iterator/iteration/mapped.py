from __future__ import annotations

from typing import Any, Callable, Iterator

from query_iterator.core.exceptions import InvalidArgumentError
from query_iterator.ports.iteration import ExternalIterator, iterate_items, iterate_values


class MappedIterator:
    """
    Applies `transform` to the value of the wrapped iterator.

    Navigation (rewind/valid/key/next) goes straight to `inner`; the transformed value
    is recomputed on every current() call and never cached.
    """

    def __init__(self, inner: ExternalIterator, transform: Callable[[Any], Any]) -> None:
        if not isinstance(inner, ExternalIterator):
            raise InvalidArgumentError(
                f"MappedIterator expects an iterator, {type(inner).__name__!r} received."
            )
        if not callable(transform):
            raise InvalidArgumentError(f"transform must be callable, got {transform!r}")

        self._inner = inner
        self._transform = transform

    @property
    def inner(self) -> ExternalIterator:
        return self._inner

    def current(self) -> Any:
        return self._transform(self._inner.current())

    def key(self) -> int:
        return self._inner.key()

    def next(self) -> None:
        self._inner.next()

    def rewind(self) -> None:
        self._inner.rewind()

    def valid(self) -> bool:
        return self._inner.valid()

    def map(self, transform: Callable[[Any], Any]) -> MappedIterator:
        return MappedIterator(self, transform)

    def __iter__(self) -> Iterator[Any]:
        return iterate_values(self)

    def items(self) -> Iterator[tuple[int, Any]]:
        return iterate_items(self)
