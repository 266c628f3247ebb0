"""bindql query layer: fragment-by-fragment statement building."""
from bindql.query.builder import QueryBuilder, StatementState

__all__ = [
    "QueryBuilder",
    "StatementState",
]
