"""Accumulate several statements into one batch for atomic submission."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List

from .errors import InvalidStateError
from .interpolate import _template_parts, interpolate
from .sql import STATEMENT_SEPARATOR
from .types import RawFragment, Statement

__all__ = ["Transaction", "TransactionState", "begin_transaction", "transaction"]

logger = logging.getLogger(__name__)


class TransactionState(str, Enum):
    """Lifecycle of a :class:`Transaction`."""

    OPEN = "open"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class Transaction:
    """Batch of statements joined into a single :class:`Statement` on commit.

    Nothing here talks to a database.  ``commit`` only hands back the combined
    query and parameters; running them inside a real transaction is up to the
    caller's driver.  Once committed or rolled back the batch is closed and
    every further call raises :class:`InvalidStateError`.
    """

    def __init__(self) -> None:
        self._state = TransactionState.OPEN
        self._queries: List[str] = []
        self._params: List[Any] = []

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def statements(self) -> tuple[str, ...]:
        return tuple(self._queries)

    def _require_open(self, operation: str) -> None:
        if self._state is not TransactionState.OPEN:
            raise InvalidStateError(
                f"cannot {operation} a transaction that is {self._state.value.replace('_', ' ')}"
            )

    def add(self, template: Any, *values: Any) -> None:
        """Interpolate a template and append it to the batch.

        Accepts the same arguments as :func:`sqlter.sql`, or a single
        already built :class:`Statement` or :class:`RawFragment`.
        """

        self._require_open("add to")
        if isinstance(template, Statement) and not values:
            statement = template
        elif isinstance(template, RawFragment) and not values:
            statement = Statement(template.text, list(template.params))
        else:
            statement = interpolate(*_template_parts(template, values))

        self._queries.append(statement.query)
        self._params.extend(statement.params)
        logger.debug(
            "Added statement %d with %d parameter(s)",
            len(self._queries),
            len(statement.params),
        )

    def commit(self) -> Statement:
        """Close the batch and return the combined statement."""

        self._require_open("commit")
        self._state = TransactionState.COMMITTED
        logger.debug("Committed transaction with %d statement(s)", len(self._queries))
        return Statement(STATEMENT_SEPARATOR.join(self._queries), list(self._params))

    def rollback(self) -> None:
        """Close the batch and discard everything added so far."""

        self._require_open("roll back")
        self._state = TransactionState.ROLLED_BACK
        logger.debug("Rolled back transaction, discarding %d statement(s)", len(self._queries))
        self._queries.clear()
        self._params.clear()


def begin_transaction() -> Transaction:
    """Return a new, open :class:`Transaction`."""

    return Transaction()


transaction = begin_transaction
