"""bindql driver layer: dialects and prepared statements over DB-API."""
from bindql.driver.base import Dialect, ErrorInfo
from bindql.driver.postgres import PostgresDialect
from bindql.driver.registry import DialectFactory
from bindql.driver.sqlite import SQLiteDialect
from bindql.driver.statement import PreparedStatement

__all__ = [
    "Dialect",
    "ErrorInfo",
    "PostgresDialect",
    "DialectFactory",
    "SQLiteDialect",
    "PreparedStatement",
]
