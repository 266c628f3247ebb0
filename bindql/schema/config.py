"""Pydantic configuration model for ``QueryBuilder``.

Example::

    from bindql import BuilderConfig, QueryBuilder

    config = BuilderConfig(dialect="postgres", log_parameters=True)
    builder = QueryBuilder(conn, config)
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BuilderConfig(BaseModel):
    """Settings shared by every statement a builder prepares.

    Attributes:
        dialect: Registered dialect name (``'sqlite'``, ``'postgres'``).
            ``None`` detects the dialect from the connection object.
        log_parameters: Include bound values in DEBUG log records.  Off by
            default since values may carry credentials or personal data.
    """

    model_config = ConfigDict(extra="forbid")

    dialect: str | None = None
    log_parameters: bool = False
