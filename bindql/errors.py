"""Custom exception hierarchy for bindql.

All public errors inherit from BindQLError so callers can catch the base
class for any bindql-specific failure.  Driver errors that the builder does
not classify (connection failures, value coercion errors) propagate
unchanged.
"""
from __future__ import annotations


class BindQLError(Exception):
    """Base exception for all bindql errors."""


class DuplicatePlaceholderError(BindQLError):
    """Raised when a placeholder is registered twice on the same builder.

    Args:
        placeholder: The offending placeholder, including its leading colon.
    """

    def __init__(self, placeholder: str) -> None:
        super().__init__(f"Duplicate placeholder: {placeholder}")
        self.placeholder = placeholder


class ExecutionError(BindQLError):
    """Raised when the driver reports a failed statement run.

    The driver exception is chained as ``__cause__``.

    Args:
        sqlstate: Five-character SQLSTATE reported by the driver.
        code: Driver-specific numeric error code.
        message: The driver's error message.
    """

    def __init__(self, sqlstate: str, code: int, message: str) -> None:
        super().__init__(
            f"SQLSTATE: {sqlstate}, Error Code: {code}, Message: {message}"
        )
        self.sqlstate = sqlstate
        self.code = code
        self.driver_message = message

    def to_error_info(self) -> tuple[str, int, str]:
        """Returns the ``(sqlstate, code, message)`` triple."""
        return (self.sqlstate, self.code, self.driver_message)


class DialectConfigError(BindQLError):
    """Raised when no dialect can be resolved for a connection.

    Detected when the builder is constructed, before any SQL is prepared,
    so a misconfigured target fails fast.

    Args:
        message: Human-readable description.
        target: The dialect name that could not be resolved, if any.
    """

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target
