"""Build a ``QueryBuilder`` on top of SQLAlchemy.

:func:`builder_from_sqlalchemy` takes the raw DB-API connection behind a
SQLAlchemy ``Engine`` or ``Connection`` and picks the matching bindql
dialect from the SQLAlchemy dialect name.

Install the optional dependency before using this module::

    pip install "bindql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from bindql.driver.converters import builder_from_sqlalchemy

    engine = create_engine("sqlite:///app.db")
    with engine.connect() as conn:
        builder_from_sqlalchemy(conn).add(
            "INSERT INTO people (name) VALUES (:name)", "Alice"
        ).execute()
        conn.commit()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindql.errors import DialectConfigError
from bindql.query.builder import QueryBuilder
from bindql.schema.config import BuilderConfig

if TYPE_CHECKING:
    from sqlalchemy import Connection, Engine

# (SQLAlchemy dialect name, DB-API driver) -> bindql dialect name
_SUPPORTED_BACKENDS: dict[tuple[str, str], str] = {
    ("sqlite", "pysqlite"): "sqlite",
    ("postgresql", "psycopg"): "postgres",
}


def builder_from_sqlalchemy(
    bind: Engine | Connection,
    config: BuilderConfig | None = None,
) -> QueryBuilder:
    """Create a :class:`QueryBuilder` over a SQLAlchemy engine or connection.

    A ``Connection`` shares its DB-API connection with the builder, so the
    builder's statements take part in the connection's transaction and are
    committed with ``conn.commit()``.  An ``Engine`` checks a fresh raw
    connection out of its pool; the caller commits and closes it through
    ``builder.connection``.

    Args:
        bind: A SQLAlchemy ``Engine`` or ``Connection``.
        config: Optional builder settings.  Its ``dialect`` is overridden by
            the one derived from ``bind``.

    Returns:
        A fresh :class:`QueryBuilder`.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        DialectConfigError: If the backend / driver pair is not supported.
    """
    try:
        from sqlalchemy import Engine as _Engine
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for builder_from_sqlalchemy(). "
            'Install it with: pip install "bindql[sqlalchemy]"'
        ) from exc

    backend = (bind.dialect.name, bind.dialect.driver)
    name = _SUPPORTED_BACKENDS.get(backend)
    if name is None:
        raise DialectConfigError(
            f"Unsupported SQLAlchemy backend '{backend[0]}+{backend[1]}'. "
            f"Supported: {sorted(f'{d}+{drv}' for d, drv in _SUPPORTED_BACKENDS)}.",
            target=backend[0],
        )

    connection = bind.raw_connection() if isinstance(bind, _Engine) else bind.connection
    effective = (config or BuilderConfig()).model_copy(update={"dialect": name})
    return QueryBuilder(connection, effective)
