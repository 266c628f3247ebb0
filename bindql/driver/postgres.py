"""PostgreSQL dialect for ``psycopg`` (v3).

Install the optional dependency before using this module::

    pip install "bindql[postgres]"
"""
from __future__ import annotations

from typing import Any

from bindql.driver.base import Dialect, ErrorInfo

# libpq PGRES_FATAL_ERROR, reported when the failed result is unavailable.
_PGRES_FATAL_ERROR = 7


class PostgresDialect(Dialect):
    """Runs ``:name`` SQL on ``psycopg`` connections.

    Parameter style: ``%(name)s`` – psycopg's named-parameter execution.
    Literal ``%`` characters are escaped as ``%%`` during translation.

    Statements are executed with ``prepare=True`` so psycopg keeps a
    server-side prepared statement for every rerun.

    Note: ``::type`` casts look like placeholders (``:type``); write
    ``CAST(x AS type)`` instead.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        return (_psycopg().DatabaseError,)

    def param_placeholder(self, name: str) -> str:
        return f"%({name})s"

    def translate(self, sql: str) -> str:
        return super().translate(sql.replace("%", "%%"))

    def run(self, cursor: Any, sql: str, params: dict[str, Any]) -> None:
        cursor.execute(sql, params, prepare=True)

    def error_info(self, exc: BaseException) -> ErrorInfo:
        sqlstate = getattr(exc, "sqlstate", None) or "HY000"
        pgresult = getattr(exc, "pgresult", None)
        code = int(pgresult.status) if pgresult is not None else _PGRES_FATAL_ERROR
        diag = getattr(exc, "diag", None)
        message = (diag.message_primary if diag is not None else None) or str(exc)
        return ErrorInfo(sqlstate, code, message)


def _psycopg() -> Any:
    try:
        import psycopg
    except ImportError as exc:
        raise ImportError(
            "psycopg is required for the postgres dialect. "
            'Install it with: pip install "bindql[postgres]"'
        ) from exc
    return psycopg
