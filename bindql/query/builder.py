"""Step-by-step SQL assembly with inline named-parameter binding.

``QueryBuilder`` accumulates SQL fragments and the values of the ``:name``
placeholders they introduce, then prepares the statement once and runs it.
Later ``execute()`` calls rebind and rerun the same prepared statement.

Minimal usage::

    QueryBuilder.instance(conn).add(
        "UPDATE t SET column1 = :column1, column2 = :column2 WHERE id = :id",
        {":column1": "value1", ":column2": "value2", ":id": 1},
    ).execute()

Step by step::

    query = QueryBuilder(conn)
    query.add("UPDATE t SET")
    query.add("column1 = :column1", "value1")
    query.add(", column2 = :column2", "value2")
    query.add("WHERE")
    query.add("id = :id", 1)
    stmt = query.execute()

Reusing the prepared statement::

    stmt = query.execute({":column1": "new_value1", ":column2": "new_value2"})

Thread safety
-------------
A builder is meant for one caller at a time.  ``add`` mutates the clause
list and parameter map without locking, and the prepare-on-first-execute
step is check-then-act.  Share a builder across threads only behind
external synchronization.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from bindql.driver.base import Dialect
from bindql.driver.registry import DialectFactory
from bindql.driver.statement import PreparedStatement
from bindql.errors import DuplicatePlaceholderError, ExecutionError
from bindql.schema.config import BuilderConfig
from bindql.schema.params import (
    Binding,
    BindingOverride,
    ParamType,
    find_placeholders,
    infer_type,
    resolve_values,
    to_param_type,
)

logger = logging.getLogger(__name__)

_MULTI_SPACE = re.compile(r" {2,}")


class StatementState(str, Enum):
    """Whether the builder has prepared its statement yet."""

    UNPREPARED = "UNPREPARED"
    PREPARED = "PREPARED"


class QueryBuilder:
    """Builds one SQL statement from fragments and runs it.

    Args:
        connection: A DB-API connection.  Owned by the caller; the builder
            only opens a cursor on it.
        config: Optional builder settings; defaults to ``BuilderConfig()``.
        dialect: Optional dialect instance.  Takes precedence over
            ``config.dialect``; when both are absent the dialect is detected
            from ``connection``.

    Raises:
        DialectConfigError: If no dialect can be resolved.
    """

    def __init__(
        self,
        connection: Any,
        config: BuilderConfig | None = None,
        dialect: Dialect | None = None,
    ) -> None:
        self._connection = connection
        self._config = config or BuilderConfig()
        self._dialect = dialect or self._resolve_dialect(connection, self._config)
        self._clauses: list[str] = []
        self._parameters: dict[str, Binding] = {}
        self._state = StatementState.UNPREPARED
        self._statement: PreparedStatement | None = None

    @classmethod
    def instance(
        cls,
        connection: Any,
        config: BuilderConfig | None = None,
        dialect: Dialect | None = None,
    ) -> QueryBuilder:
        """Alternative to the constructor for direct chaining::

            stmt = QueryBuilder.instance(conn).add("SELECT * FROM t WHERE id = :id", 1).execute()
        """
        return cls(connection, config, dialect)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(
        self,
        fragment: str,
        value: Any = None,
        type: ParamType | str | None = None,
    ) -> QueryBuilder:
        """Append ``fragment`` and bind the placeholders it introduces.

        Each ``:name`` placeholder found in ``fragment`` (left to right) is
        bound according to the shape of ``value``:

        - mapping: ``value[":name"]``, else ``value[i]`` (position of the
          placeholder in this fragment), else ``None``;
        - list or tuple: ``value[i]``, else ``None``;
        - anything else: the same ``value`` for every placeholder, so
          ``add("x = :a AND y = :b", 5)`` binds both to 5.

        Args:
            fragment: SQL text, appended verbatim.
            value: Value(s) for the fragment's placeholders.
            type: Bind type for every placeholder of this fragment; inferred
                per value when omitted.

        Returns:
            This builder, for chaining.

        Raises:
            DuplicatePlaceholderError: If a placeholder is already registered
                or occurs twice in ``fragment``.  The fragment text stays
                appended; none of its placeholders are registered.

        Example::

            builder.add("UPDATE t SET")                      # no binding
            builder.add("column1 = :column1 ,", "value1")    # :column1 -> 'value1'
            builder.add("column2 IN (:a, :b, :c)", [1, 2, 3])
        """
        if self._state is StatementState.PREPARED:
            logger.warning(
                "Fragment added after the statement was prepared; it is not "
                "part of the executed SQL: %r",
                fragment,
            )

        self._clauses.append(fragment)
        placeholders = find_placeholders(fragment)
        seen: set[str] = set()
        for placeholder in placeholders:
            if placeholder in self._parameters or placeholder in seen:
                raise DuplicatePlaceholderError(placeholder)
            seen.add(placeholder)

        explicit_type = to_param_type(type)
        for placeholder, bound in zip(placeholders, resolve_values(placeholders, value)):
            self._parameters[placeholder] = Binding(
                value=bound, type=explicit_type or infer_type(bound)
            )
        return self

    def execute(self, bindings: Mapping[str, Any] | None = None) -> PreparedStatement:
        """Prepare (first call only), bind, and run the statement.

        Every registered placeholder is bound, in registration order.  An
        entry of ``bindings`` replaces the recorded value of its placeholder:
        a bare value has its type re-inferred, a ``{"value": ..., "type": ...}``
        mapping or :class:`BindingOverride` may carry an explicit type.

        Args:
            bindings: Optional replacement values keyed by placeholder
                (``":name"``).

        Returns:
            The executed statement; fetch rows from it for a SELECT.

        Raises:
            ExecutionError: If the driver reports a failed run.  The prepared
                statement stays usable for another ``execute``.

        Example::

            builder = QueryBuilder.instance(conn).add(
                "INSERT INTO people (name, age) VALUES (:name, :age)",
                {":name": "Alice", ":age": 30},
            )
            builder.execute()
            builder.execute({":name": "George", ":age": 40})
        """
        statement = self._prepare()
        overrides = dict(bindings or {})

        unknown = [key for key in overrides if key not in self._parameters]
        if unknown:
            logger.warning("Ignoring bindings for unknown placeholders: %s", unknown)

        for placeholder, binding in self._parameters.items():
            if placeholder in overrides:
                binding = _override_binding(overrides[placeholder])
            statement.bind(placeholder, binding.value, binding.type)

        if self._config.log_parameters:
            logger.debug("Executing statement with parameters %r", statement.params)
        else:
            logger.debug("Executing statement with %d parameter(s)", len(self._parameters))

        if not statement.run():
            info = statement.error_info()
            logger.debug("Statement execution failed: %s", info)
            raise ExecutionError(*info) from statement.last_exception

        return statement

    def get_query_string(self) -> str:
        """Return the SQL text built so far.

        Clauses are joined by one space, runs of spaces collapse to one, and
        a space before a comma is dropped, so ``["col1 = :c1", ", col2 = :c2"]``
        gives ``"col1 = :c1, col2 = :c2"``.
        """
        joined = _MULTI_SPACE.sub(" ", " ".join(self._clauses))
        return joined.replace(" ,", ",")

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def clauses(self) -> tuple[str, ...]:
        return tuple(self._clauses)

    @property
    def parameters(self) -> Mapping[str, Binding]:
        """Registered placeholders and their bindings, in registration order."""
        return MappingProxyType(self._parameters)

    @property
    def state(self) -> StatementState:
        return self._state

    @property
    def statement(self) -> PreparedStatement | None:
        """The prepared statement, or ``None`` before the first ``execute``."""
        return self._statement

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    def __repr__(self) -> str:
        return (
            f"QueryBuilder(dialect={self._dialect.dialect_name!r}, "
            f"state={self._state.value}, clauses={len(self._clauses)}, "
            f"parameters={len(self._parameters)})"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _prepare(self) -> PreparedStatement:
        statement = self._statement
        if statement is None:
            sql = self.get_query_string()
            logger.debug("Preparing %s statement: %s", self._dialect.dialect_name, sql)
            statement = self._dialect.prepare(self._connection, sql)
            self._statement = statement
            self._state = StatementState.PREPARED
        return statement

    @staticmethod
    def _resolve_dialect(connection: Any, config: BuilderConfig) -> Dialect:
        if config.dialect is not None:
            return DialectFactory.create(config.dialect)
        return DialectFactory.detect(connection)


def _override_binding(entry: Any) -> Binding:
    """Turn one ``execute()`` override entry into an effective binding."""
    if isinstance(entry, BindingOverride):
        return entry.resolve()
    if isinstance(entry, Mapping):
        return BindingOverride.model_validate(entry).resolve()
    return Binding(value=entry, type=infer_type(entry))
