from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from query_iterator.adapters.resolve import resolve_source
from query_iterator.config.settings import IteratorConfig
from query_iterator.iteration.query_iterator import QueryIterator


def to_iterator(
    query: Any,
    chunk_size: int | None = None,
    *,
    session: Session | None = None,
    config: IteratorConfig | None = None,
) -> QueryIterator:
    """
    Wrap a query (Select, raw SQL, list or RecordSource) into a QueryIterator.

    `config` is resolved by the caller, e.g. `get_settings().iterator_config()`.
    """
    source = resolve_source(query, session=session)
    return QueryIterator(source, chunk_size, config=config)
