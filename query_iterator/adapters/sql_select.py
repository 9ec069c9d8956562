from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.engine import Result
from sqlalchemy.orm import Session

from query_iterator.core.constants import LOGGER_NAME
from query_iterator.core.exceptions import InvalidArgumentError
from query_iterator.services.sql_ident import validate_columns
from query_iterator.services.sql_pagination import page_offset

logger = logging.getLogger(LOGGER_NAME)


def is_single_entity_select(statement: Select) -> bool:
    """select(User) -> ORM-объекты через scalars(); всё остальное -> dict-строки."""
    descriptions = statement.column_descriptions
    if len(descriptions) != 1:
        return False
    entity = descriptions[0].get("entity")
    return entity is not None and descriptions[0].get("expr") is entity


class SelectRecordSource:
    """RecordSource over a SQLAlchemy Select (Core or ORM) executed on a sync Session."""

    def __init__(self, session: Session, statement: Select) -> None:
        if not isinstance(statement, Select):
            raise InvalidArgumentError(
                f"SelectRecordSource expects sqlalchemy Select, {type(statement).__name__!r} received."
            )
        if not statement._order_by_clauses:
            raise ValueError("Chunked iteration requires deterministic ORDER BY in the statement.")

        self._session = session
        self._statement = statement
        self._scalars = is_single_entity_select(statement)

    @property
    def statement(self) -> Select:
        return self._statement

    def fetch_page(self, page: int, per_page: int) -> list[Any]:
        offset = page_offset(page, per_page)
        stmt = self._statement.limit(per_page).offset(offset)

        logger.debug("select source page=%d per_page=%d offset=%d", page, per_page, offset)
        return self._rows(self._session.execute(stmt))

    def count(self) -> int:
        subq = self._statement.order_by(None).subquery()
        stmt = select(func.count()).select_from(subq)
        return int(self._session.execute(stmt).scalar_one())

    def first(self, columns: Sequence[str] | None = None) -> Any | None:
        names = validate_columns(columns)

        if not names:
            rows = self._rows(self._session.execute(self._statement.limit(1)))
            return rows[0] if rows else None

        cols = [self._column(n) for n in names]
        stmt = self._statement.with_only_columns(*cols).limit(1)
        row = self._session.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def fetch_all(self) -> list[Any]:
        return self._rows(self._session.execute(self._statement))

    def _rows(self, result: Result) -> list[Any]:
        if self._scalars:
            return list(result.scalars().all())
        return [dict(r) for r in result.mappings().all()]

    def _column(self, name: str):
        try:
            return self._statement.selected_columns[name]
        except KeyError:
            raise ValueError(f"Column {name!r} is not selected by the statement") from None
