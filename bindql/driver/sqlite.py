"""SQLite dialect for the standard-library ``sqlite3`` driver."""
from __future__ import annotations

import sqlite3

from bindql.driver.base import Dialect, ErrorInfo

_SQLITE_ERROR = 1


class SQLiteDialect(Dialect):
    """Runs ``:name`` SQL on ``sqlite3`` connections.

    Parameter style: ``:name`` – sqlite3's own named style, so SQL text is
    passed through untranslated and values are bound from a dict keyed by
    bare name.

    Error info follows the SQLSTATE convention: ``23000`` for constraint
    violations, ``HY000`` for everything else, with the SQLite result code
    (``SQLITE_ERROR`` when the driver does not expose one).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        return (sqlite3.DatabaseError,)

    def param_placeholder(self, name: str) -> str:
        return f":{name}"

    def translate(self, sql: str) -> str:
        return sql

    def error_info(self, exc: BaseException) -> ErrorInfo:
        sqlstate = "23000" if isinstance(exc, sqlite3.IntegrityError) else "HY000"
        code = getattr(exc, "sqlite_errorcode", None) or _SQLITE_ERROR
        return ErrorInfo(sqlstate, code, str(exc))
