from .sql_ident import validate_columns, validate_sql_ident
from .sql_pagination import apply_limit_offset_keep_order

__all__ = [
    "apply_limit_offset_keep_order",
    "validate_columns",
    "validate_sql_ident",
]
