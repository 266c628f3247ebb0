"""Dialect registry (Open/Closed Principle).

``DialectFactory``
    Central registry for :class:`~bindql.driver.base.Dialect`
    implementations.  Register a dialect once; ``QueryBuilder`` looks it up
    by name, or by the module of the connection object it is given.

Usage::

    from bindql.driver.registry import DialectFactory

    @DialectFactory.register("duckdb", modules=("duckdb",))
    class DuckDBDialect(Dialect):
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, ClassVar

from bindql.driver.base import Dialect
from bindql.errors import DialectConfigError


class DialectFactory:
    """Registry mapping dialect names to :class:`Dialect` classes.

    Each dialect may also claim the top-level driver modules whose
    connection objects it handles, which drives :meth:`detect`.

    Example::

        @DialectFactory.register("duckdb", modules=("duckdb",))
        class DuckDBDialect(Dialect):
            ...

        dialect = DialectFactory.create("duckdb")
    """

    _dialects: ClassVar[dict[str, type[Dialect]]] = {}
    _modules: ClassVar[dict[str, str]] = {}

    @classmethod
    def register(
        cls, name: str, modules: Iterable[str] = ()
    ) -> Callable[[type[Dialect]], type[Dialect]]:
        """Decorator that registers a dialect class under ``name``.

        Args:
            name: The dialect name (e.g. ``"postgres"``).
            modules: Top-level driver modules (e.g. ``"psycopg"``) whose
                connections this dialect handles.

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[Dialect]) -> type[Dialect]:
            cls.register_class(name, dialect_cls, modules)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(
        cls, name: str, dialect_cls: type[Dialect], modules: Iterable[str] = ()
    ) -> None:
        """Register a dialect class without using the decorator form.

        Args:
            name: The dialect name.
            dialect_cls: The :class:`Dialect` subclass to register.
            modules: Top-level driver modules handled by this dialect.
        """
        cls._dialects[name] = dialect_cls
        for module in modules:
            cls._modules[module] = name

    @classmethod
    def create(cls, name: str) -> Dialect:
        """Instantiate the dialect registered for ``name``.

        Raises:
            DialectConfigError: If no dialect is registered for ``name``.
        """
        dialect_cls = cls._dialects.get(name)
        if dialect_cls is None:
            registered = sorted(cls._dialects)
            raise DialectConfigError(
                f"Unsupported dialect: '{name}'. Registered dialects: {registered}.",
                target=name,
            )
        return dialect_cls()

    @classmethod
    def detect(cls, connection: Any) -> Dialect:
        """Instantiate the dialect that handles ``connection``'s driver.

        The driver is identified by the top-level module of the connection's
        class (``sqlite3.Connection`` → ``sqlite3``).

        Raises:
            DialectConfigError: If no registered dialect claims the module.
        """
        module = type(connection).__module__.split(".")[0]
        name = cls._modules.get(module)
        if name is None:
            raise DialectConfigError(
                f"Cannot detect a dialect for connections from '{module}'. "
                "Pass BuilderConfig(dialect=...) or a Dialect instance."
            )
        return cls.create(name)

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._dialects)
