from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


Record = Any


@runtime_checkable
class RecordSource(Protocol):
    """Источник записей: постраничная выборка, count, first и полный результат."""

    def fetch_page(self, page: int, per_page: int) -> Sequence[Record]:
        """Вернуть страницу (page начинается с 1); после конца пустую последовательность."""
        ...

    def count(self) -> int:
        ...

    def first(self, columns: Sequence[str] | None = None) -> Record | None:
        ...

    def fetch_all(self) -> Sequence[Record]:
        ...
