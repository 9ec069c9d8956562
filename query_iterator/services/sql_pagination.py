from __future__ import annotations

import re
from typing import Sequence

from query_iterator.services.sql_ident import validate_columns

_ORDER_BY_RE = re.compile(r"\border\s+by\b", re.IGNORECASE)
_LIMIT_RE = re.compile(r"\blimit\b", re.IGNORECASE)
_OFFSET_RE = re.compile(r"\boffset\b", re.IGNORECASE)


def normalize_query(base_query: str) -> str:
    q = (base_query or "").strip().rstrip(";").strip()
    if not q:
        raise ValueError("Query is empty.")
    return q


def page_offset(page: int, per_page: int) -> int:
    """1-based page -> OFFSET."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    return (page - 1) * per_page


def apply_limit_offset_keep_order(base_query: str, *, limit: int, offset: int) -> str:
    """
    Pagination helper for raw SQL sources.

    Requirements:
    - base_query must contain ORDER BY (deterministic paging)
    - base_query must NOT contain LIMIT/OFFSET (the iterator applies them)
    """
    q = normalize_query(base_query)

    if not _ORDER_BY_RE.search(q):
        raise ValueError("Chunked iteration requires deterministic ORDER BY in the query.")

    if _LIMIT_RE.search(q) or _OFFSET_RE.search(q):
        raise ValueError(
            "Query must not contain LIMIT/OFFSET; pagination is handled by the iterator."
        )

    return f"{q} LIMIT {int(limit)} OFFSET {int(offset)}"


def wrap_count(base_query: str) -> str:
    q = normalize_query(base_query)
    return f"SELECT COUNT(*) FROM ({q}) AS src"


def wrap_first(base_query: str, columns: Sequence[str] | None = None) -> str:
    q = normalize_query(base_query)
    names = validate_columns(columns)
    projection = ", ".join(f"src.{n}" for n in names) if names else "*"
    return f"SELECT {projection} FROM ({q}) AS src LIMIT 1"
