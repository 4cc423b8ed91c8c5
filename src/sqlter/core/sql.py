"""Helper utilities for constructing SQL fragments.

This module keeps the low level string formatting in one place so the
interpolator and the clause builders only deal with which values end up where.
Every placeholder, separator and escape sequence the package emits comes from
here, which keeps the generated SQL deterministic for the snapshot style tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .types import RawFragment

PLACEHOLDER = "?"
LIST_SEPARATOR = ", "
STATEMENT_SEPARATOR = "; "

# Left behind by a disabled conditional branch rendered as plain text.
LEGACY_SKIP_MARKER = "sql`"

_ESCAPES = str.maketrans(
    {
        "\0": "\\0",
        "\b": "\\b",
        "\t": "\\t",
        "\x1a": "\\z",
        "\n": "\\n",
        "\r": "\\r",
        '"': '\\"',
        "'": "\\'",
        "\\": "\\\\",
        "%": "\\%",
    }
)


def escape(value: str) -> str:
    """Escape ``value`` for embedding inside a quoted MySQL style literal.

    NUL, backspace, tab, Ctrl-Z, line feed, carriage return, both quote
    characters, backslash and percent are replaced by their two character
    escape sequences; everything else passes through unchanged.

    This is not a replacement for placeholder binding.  Use it only for text
    that has to live inside a :func:`raw` fragment, for instance a ``LIKE``
    pattern assembled by hand.
    """

    return value.translate(_ESCAPES)


def raw(text: str, params: Sequence[Any] | None = None) -> RawFragment:
    """Return ``text`` wrapped so the interpolator splices it verbatim.

    No validation is performed: the caller vouches for ``text``.  ``params``
    supplies values for any ``?`` markers ``text`` already contains.
    """

    return RawFragment(text, tuple(params) if params else ())


def format_placeholder_list(count: int) -> str:
    """Return ``count`` placeholders formatted for ``IN`` style expressions."""

    return "({})".format(LIST_SEPARATOR.join([PLACEHOLDER] * count))


def format_assignments(keys: Iterable[object]) -> str:
    """Return ``key = ?`` pairs for each key, e.g. for an ``UPDATE ... SET``."""

    return LIST_SEPARATOR.join(f"{key} = {PLACEHOLDER}" for key in keys)
