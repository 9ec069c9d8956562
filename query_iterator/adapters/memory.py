from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from query_iterator.services.sql_ident import validate_columns
from query_iterator.services.sql_pagination import page_offset


class SequenceRecordSource:
    """In-memory RecordSource over an already materialized list of records."""

    def __init__(self, records: Iterable[Any]) -> None:
        self._records: tuple[Any, ...] = tuple(records)

    def fetch_page(self, page: int, per_page: int) -> list[Any]:
        offset = page_offset(page, per_page)
        return list(self._records[offset : offset + per_page])

    def count(self) -> int:
        return len(self._records)

    def first(self, columns: Sequence[str] | None = None) -> Any | None:
        if not self._records:
            return None

        record = self._records[0]
        names = validate_columns(columns)
        if not names:
            return record

        if not isinstance(record, Mapping):
            raise ValueError("Column selection requires mapping records")
        return {n: record[n] for n in names}

    def fetch_all(self) -> list[Any]:
        return list(self._records)
