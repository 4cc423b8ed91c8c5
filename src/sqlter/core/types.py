"""Public data structures shared by the interpolator and the clause builders."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Literal, Tuple

__all__ = [
    "JoinType",
    "OrderDirection",
    "RawFragment",
    "Statement",
    "ValueKind",
]

JoinType = Literal["INNER", "LEFT", "RIGHT", "FULL"]
OrderDirection = Literal["ASC", "DESC"]


class ValueKind(str, Enum):
    """How an interpolated value is rendered into a statement."""

    SKIP = "skip"
    NULL = "null"
    FRAGMENT = "fragment"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


@dataclass(frozen=True)
class RawFragment:
    """Trusted SQL text spliced into a statement verbatim.

    ``text`` is never escaped or replaced by a placeholder, so it must not
    contain untrusted input.  ``params`` holds the values for any ``?`` markers
    inside ``text``; they are appended to the outer statement's parameters at
    the position where the fragment is interpolated.
    """

    text: str
    params: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))


@dataclass(frozen=True)
class Statement:
    """A parameterised query ready to be handed to a database driver.

    Iterating yields ``query`` then ``params`` so a statement unpacks as
    ``query, params = statement`` and can be passed straight to a DB-API
    cursor with ``cursor.execute(*statement)``.
    """

    query: str
    params: List[Any] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        yield self.query
        yield self.params

    def as_fragment(self) -> RawFragment:
        return RawFragment(self.query, tuple(self.params))

