"""DB-API backed prepared statement handle."""
from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from bindql.schema.params import ParamType

if TYPE_CHECKING:
    from bindql.driver.base import Dialect, ErrorInfo


class PreparedStatement:
    """A statement prepared once and run any number of times.

    The SQL text is translated to the driver's placeholder style when the
    statement is created and never changes afterwards.  Values are bound by
    placeholder and kept until rebound, so each run sees the latest binding
    of every placeholder.

    Result rows are read through the usual DB-API surface (``fetchone``,
    ``fetchmany``, ``fetchall``, iteration), delegated to the cursor.

    Args:
        cursor: An open DB-API cursor owned by this statement.
        query_string: SQL text with ``:name`` placeholders.
        dialect: The dialect that translates, coerces, and runs.
    """

    def __init__(self, cursor: Any, query_string: str, dialect: Dialect) -> None:
        self.query_string = query_string
        self._cursor = cursor
        self._dialect = dialect
        self._sql = dialect.translate(query_string)
        self._params: dict[str, Any] = {}
        self._error: ErrorInfo | None = None
        self.last_exception: BaseException | None = None

    @property
    def sql(self) -> str:
        """The SQL text in the driver's native placeholder style."""
        return self._sql

    @property
    def params(self) -> dict[str, Any]:
        """A copy of the currently bound, coerced values keyed by bare name."""
        return dict(self._params)

    def bind(self, placeholder: str, value: Any, param_type: ParamType) -> None:
        """Bind ``value`` as ``param_type`` to ``placeholder`` (``:name`` form)."""
        self._params[placeholder[1:]] = self._dialect.coerce(value, param_type)

    def run(self) -> bool:
        """Execute with the current bindings.

        Returns:
            ``True`` on success.  ``False`` when the driver raised one of the
            dialect's error types; :meth:`error_info` then describes it.
        """
        self._error = None
        self.last_exception = None
        try:
            self._dialect.run(self._cursor, self._sql, self._params)
        except self._dialect.error_types as exc:
            self._error = self._dialect.error_info(exc)
            self.last_exception = exc
            return False
        return True

    def error_info(self) -> ErrorInfo | None:
        """The ``(sqlstate, code, message)`` of the last failed run, if any."""
        return self._error

    # ------------------------------------------------------------------
    # Result surface (delegated to the cursor)
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> Any:
        return self._cursor

    @property
    def rowcount(self) -> int:
        return self._cursor.rowcount

    @property
    def lastrowid(self) -> Any:
        return getattr(self._cursor, "lastrowid", None)

    @property
    def description(self) -> Any:
        return self._cursor.description

    def fetchone(self) -> Any:
        return self._cursor.fetchone()

    def fetchmany(self, size: int | None = None) -> list[Any]:
        if size is None:
            return self._cursor.fetchmany()
        return self._cursor.fetchmany(size)

    def fetchall(self) -> list[Any]:
        return self._cursor.fetchall()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._cursor)

    def close(self) -> None:
        """Close the underlying cursor."""
        self._cursor.close()

    def __repr__(self) -> str:
        return f"PreparedStatement({self.query_string!r}, dialect={self._dialect.dialect_name!r})"
