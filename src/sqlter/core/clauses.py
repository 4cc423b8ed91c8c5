"""Builders for common SQL clauses.

Each builder returns a :class:`RawFragment`, so its output is spliced into a
template verbatim.  Identifiers and conditions passed to these helpers are not
escaped; only values that end up as ``?`` parameters are bound safely.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List

from .sql import LIST_SEPARATOR, PLACEHOLDER, raw
from .types import JoinType, OrderDirection, RawFragment

__all__ = ["case_when", "group_by", "join", "limit", "order_by"]


def case_when(field: str, cases: Mapping[str, Any]) -> RawFragment:
    """Return a ``CASE`` expression mapping values of ``field`` to results.

    Every entry of ``cases`` becomes ``WHEN field = ? THEN ?``; the condition
    and the result are both bound, interleaved in iteration order.
    """

    conditions = " ".join(
        f"WHEN {field} = {PLACEHOLDER} THEN {PLACEHOLDER}" for _ in cases
    )
    params: List[Any] = []
    for condition, result in cases.items():
        params.extend((condition, result))
    return raw(f"CASE {conditions} END", params)


def join(joins: Mapping[str, str], type: JoinType = "INNER") -> RawFragment:
    """Return one ``<type> JOIN table ON condition`` clause per entry of ``joins``."""

    return raw(
        " ".join(f"{type} JOIN {table} ON {condition}" for table, condition in joins.items())
    )


def order_by(order: str | Mapping[str, OrderDirection]) -> RawFragment:
    """Return an ``ORDER BY`` clause.

    A string is used as is; a mapping of ``field -> direction`` is rendered in
    iteration order with each direction upper-cased.
    """

    if isinstance(order, str):
        return raw(f"ORDER BY {order}")
    clauses = LIST_SEPARATOR.join(
        f"{field} {direction.upper()}" for field, direction in order.items()
    )
    return raw(f"ORDER BY {clauses}")


def _normalize_fields(fields: str | Sequence[str]) -> list[str]:
    if isinstance(fields, str):
        return [fields]
    return list(fields)


def group_by(fields: str | Sequence[str]) -> RawFragment:
    """Return a ``GROUP BY`` clause for one field or several, in order."""

    return raw(f"GROUP BY {LIST_SEPARATOR.join(_normalize_fields(fields))}")


def limit(count: int, offset: int | None = None) -> RawFragment:
    """Return ``LIMIT ?`` or ``LIMIT ? OFFSET ?`` carrying its own parameters.

    The fragment binds ``count`` (and ``offset`` when given, zero included),
    so it can be interpolated without supplying the values a second time.
    """

    if offset is not None:
        return raw(f"LIMIT {PLACEHOLDER} OFFSET {PLACEHOLDER}", [count, offset])
    return raw(f"LIMIT {PLACEHOLDER}", [count])
