"""bindql – build SQL statements fragment by fragment, binding as you go.

Public API
----------
``QueryBuilder``
    Accumulates SQL fragments and the values of their ``:name``
    placeholders, prepares the statement once, and runs it any number of
    times with optional replacement values.

``builder_from_sqlalchemy``
    Create a ``QueryBuilder`` over a SQLAlchemy engine or connection.

Re-exported types
-----------------
``ParamType``, ``Binding``, ``BindingOverride``, ``BuilderConfig``,
``PreparedStatement``, ``Dialect`` and its built-in implementations, and all
error classes.

Extensibility
-------------
New drivers can be supported by registering a dialect::

    from bindql.driver.registry import DialectFactory

    @DialectFactory.register("duckdb", modules=("duckdb",))
    class DuckDBDialect(Dialect):
        ...

After registration, ``QueryBuilder`` detects it for any connection whose
class lives in the ``duckdb`` module, or picks it up by name through
``BuilderConfig(dialect="duckdb")``.
"""

from __future__ import annotations

from bindql.driver.base import Dialect, ErrorInfo
from bindql.driver.converters import builder_from_sqlalchemy
from bindql.driver.postgres import PostgresDialect
from bindql.driver.registry import DialectFactory
from bindql.driver.sqlite import SQLiteDialect
from bindql.driver.statement import PreparedStatement
from bindql.errors import (
    BindQLError,
    DialectConfigError,
    DuplicatePlaceholderError,
    ExecutionError,
)
from bindql.query.builder import QueryBuilder, StatementState
from bindql.schema.config import BuilderConfig
from bindql.schema.params import Binding, BindingOverride, ParamType, infer_type

# ---------------------------------------------------------------------------
# Register built-in dialects with DialectFactory
# ---------------------------------------------------------------------------

DialectFactory.register_class("sqlite", SQLiteDialect, modules=("sqlite3",))
DialectFactory.register_class("postgres", PostgresDialect, modules=("psycopg",))

__all__ = [
    # Core
    "QueryBuilder",
    "StatementState",
    "PreparedStatement",
    "builder_from_sqlalchemy",
    # Parameters
    "ParamType",
    "Binding",
    "BindingOverride",
    "infer_type",
    # Configuration
    "BuilderConfig",
    # Dialects
    "Dialect",
    "ErrorInfo",
    "DialectFactory",
    "SQLiteDialect",
    "PostgresDialect",
    # Errors
    "BindQLError",
    "DuplicatePlaceholderError",
    "ExecutionError",
    "DialectConfigError",
]
