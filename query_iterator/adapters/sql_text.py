from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

from query_iterator.core.constants import LOGGER_NAME
from query_iterator.services.sql_pagination import (
    apply_limit_offset_keep_order,
    normalize_query,
    page_offset,
    wrap_count,
    wrap_first,
)

logger = logging.getLogger(LOGGER_NAME)


class TextQueryRecordSource:
    """
    RecordSource over a raw SQL string.

    The query must have a deterministic ORDER BY and no LIMIT/OFFSET of its own;
    both are checked up front so a bad query fails before the first page.
    """

    def __init__(
        self,
        session: Session,
        query: str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self._query = normalize_query(query)
        apply_limit_offset_keep_order(self._query, limit=1, offset=0)

        self._session = session
        self._params: dict[str, Any] = dict(params or {})

    @property
    def query(self) -> str:
        return self._query

    def fetch_page(self, page: int, per_page: int) -> list[dict[str, Any]]:
        sql = apply_limit_offset_keep_order(
            self._query, limit=per_page, offset=page_offset(page, per_page)
        )
        logger.debug("text source page=%d per_page=%d sql=%s", page, per_page, sql)
        return self._mappings(sql)

    def count(self) -> int:
        res = self._session.execute(text(wrap_count(self._query)), self._params)
        return int(res.scalar_one())

    def first(self, columns: Sequence[str] | None = None) -> dict[str, Any] | None:
        res = self._session.execute(text(wrap_first(self._query, columns)), self._params)
        row = res.mappings().first()
        return dict(row) if row is not None else None

    def fetch_all(self) -> list[dict[str, Any]]:
        return self._mappings(self._query)

    def _mappings(self, sql: str) -> list[dict[str, Any]]:
        res = self._session.execute(text(sql), self._params)
        # RowMapping -> dict: stable downstream type
        return [dict(r) for r in res.mappings().all()]
