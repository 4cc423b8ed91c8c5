from .clauses import case_when, group_by, join, limit, order_by
from .errors import InvalidStateError, MalformedInputError, SqlterError
from .interpolate import classify, interpolate, sql, when
from .sql import escape, raw
from .transaction import Transaction, TransactionState, begin_transaction, transaction
from .types import JoinType, OrderDirection, RawFragment, Statement, ValueKind

__all__ = [
    "InvalidStateError",
    "JoinType",
    "MalformedInputError",
    "OrderDirection",
    "RawFragment",
    "SqlterError",
    "Statement",
    "Transaction",
    "TransactionState",
    "ValueKind",
    "begin_transaction",
    "case_when",
    "classify",
    "escape",
    "group_by",
    "interpolate",
    "join",
    "limit",
    "order_by",
    "raw",
    "sql",
    "transaction",
    "when",
]
