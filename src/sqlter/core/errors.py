"""Exceptions raised by sqlter."""

from __future__ import annotations

__all__ = ["InvalidStateError", "MalformedInputError", "SqlterError"]


class SqlterError(Exception):
    """Base class for every error raised by the package."""


class MalformedInputError(SqlterError, ValueError):
    """Raised when template arguments break the segments/values contract."""


class InvalidStateError(SqlterError, RuntimeError):
    """Raised when a transaction is used after it was committed or rolled back."""
