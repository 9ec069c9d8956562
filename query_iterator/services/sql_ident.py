from __future__ import annotations

import re
from typing import Sequence

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_sql_ident(name: str, *, what: str = "column") -> str:
    n = (name or "").strip()
    if not _IDENT_RE.fullmatch(n):
        raise ValueError(f"Invalid {what}: {n!r}. Expected SQL identifier, e.g. 'created_at'")
    return n


def validate_columns(columns: Sequence[str] | None) -> tuple[str, ...]:
    """
    Column selection for first(): None / [] / ["*"] mean "all columns" -> ().
    """
    if columns is None or isinstance(columns, str):
        columns = [columns] if columns else []

    names = [c for c in columns if c != "*"]
    if len(names) != len(columns) and names:
        raise ValueError("'*' cannot be combined with explicit columns")

    return tuple(validate_sql_ident(c, what="column") for c in names)
