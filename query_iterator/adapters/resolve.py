from __future__ import annotations

from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import Session

from query_iterator.adapters.memory import SequenceRecordSource
from query_iterator.adapters.sql_select import SelectRecordSource
from query_iterator.adapters.sql_text import TextQueryRecordSource
from query_iterator.core.exceptions import InvalidArgumentError
from query_iterator.ports.source import RecordSource


def resolve_source(query: Any, session: Session | None = None) -> RecordSource:
    # 1) уже готовый источник: используем как есть
    if isinstance(query, RecordSource):
        return query

    # 2) SQL-источники требуют сессию
    if isinstance(query, (Select, str)):
        if session is None:
            raise InvalidArgumentError(
                f"A Session is required to iterate {type(query).__name__!r} queries."
            )
        if isinstance(query, Select):
            return SelectRecordSource(session, query)
        return TextQueryRecordSource(session, query)

    # 3) уже материализованные данные
    if isinstance(query, (list, tuple)):
        return SequenceRecordSource(query)

    raise InvalidArgumentError(
        "Cannot build a RecordSource: expected RecordSource, sqlalchemy Select, "
        f"SQL string or list. {type(query).__name__!r} received."
    )
