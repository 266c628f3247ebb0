"""Dialect abstraction: the seam between ``:name`` SQL and a DB-API driver.

The Template Method pattern (GoF) is used:
- ``Dialect`` defines the prepare / bind / run skeleton shared by every
  driver.
- ``SQLiteDialect`` and ``PostgresDialect`` override the driver-specific
  steps (placeholder style, exception classes, error-info extraction).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NamedTuple

from bindql.driver.statement import PreparedStatement
from bindql.schema.params import PLACEHOLDER_PATTERN, ParamType


class ErrorInfo(NamedTuple):
    """The ``(sqlstate, code, message)`` triple of a failed run."""

    sqlstate: str
    code: int
    message: str


class Dialect(ABC):
    """Abstract base for driver-specific dialects.

    Subclasses implement the driver-specific methods; ``QueryBuilder`` only
    talks to this interface and to the :class:`PreparedStatement` it returns.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'sqlite'`` or ``'postgres'``)."""

    @property
    @abstractmethod
    def error_types(self) -> tuple[type[BaseException], ...]:
        """Driver exception classes that mean "the statement run failed"."""

    @abstractmethod
    def param_placeholder(self, name: str) -> str:
        """Return the driver's native placeholder for a named parameter.

        Args:
            name: Parameter name without the leading colon.

        Returns:
            Driver-specific placeholder string.
        """

    @abstractmethod
    def error_info(self, exc: BaseException) -> ErrorInfo:
        """Extract ``(sqlstate, code, message)`` from a driver exception."""

    def translate(self, sql: str) -> str:
        """Rewrite every ``:name`` placeholder into the driver's style."""
        return PLACEHOLDER_PATTERN.sub(
            lambda match: self.param_placeholder(match.group(0)[1:]), sql
        )

    def coerce(self, value: Any, param_type: ParamType) -> Any:
        """Convert ``value`` to the Python type the driver binds as ``param_type``.

        ``None`` always binds as SQL NULL, whatever the requested type.  Text and
        binary values pass through unchanged as STRING.
        """
        if value is None or param_type is ParamType.NULL:
            return None
        if param_type is ParamType.INTEGER:
            return int(value)
        if param_type is ParamType.BOOLEAN:
            return bool(value)
        if isinstance(value, (str, bytes, bytearray, memoryview)):
            return value
        return str(value)

    def prepare(self, connection: Any, sql: str) -> PreparedStatement:
        """Open a cursor on ``connection`` and wrap it as a prepared statement."""
        return PreparedStatement(connection.cursor(), sql, self)

    def run(self, cursor: Any, sql: str, params: dict[str, Any]) -> None:
        """Execute translated ``sql`` on ``cursor`` with named ``params``."""
        cursor.execute(sql, params)
