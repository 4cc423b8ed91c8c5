"""Public package API."""

from importlib import metadata

from .core import (
    InvalidStateError,
    JoinType,
    MalformedInputError,
    OrderDirection,
    RawFragment,
    SqlterError,
    Statement,
    Transaction,
    TransactionState,
    ValueKind,
    begin_transaction,
    case_when,
    classify,
    escape,
    group_by,
    interpolate,
    join,
    limit,
    order_by,
    raw,
    sql,
    transaction,
    when,
)

__all__ = [
    "sql",
    "interpolate",
    "raw",
    "escape",
    "when",
    "classify",
    "case_when",
    "join",
    "order_by",
    "group_by",
    "limit",
    "begin_transaction",
    "transaction",
    "Transaction",
    "TransactionState",
    "RawFragment",
    "Statement",
    "ValueKind",
    "JoinType",
    "OrderDirection",
    "SqlterError",
    "MalformedInputError",
    "InvalidStateError",
]

try:
    __version__ = metadata.version("sqlter")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
