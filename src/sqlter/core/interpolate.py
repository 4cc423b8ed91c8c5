"""Turn literal segments and interpolated values into a parameterised query."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List

from .errors import MalformedInputError
from .sql import (
    LEGACY_SKIP_MARKER,
    PLACEHOLDER,
    format_assignments,
    format_placeholder_list,
)
from .types import RawFragment, Statement, ValueKind

__all__ = ["classify", "interpolate", "sql", "when"]


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` that decides how ``value`` is rendered.

    The checks run in a fixed order: fragments before mappings and sequences
    before scalars.  Anything unrecognised is treated as a scalar and bound as
    a single parameter.
    """

    if isinstance(value, str):
        # Legacy: a disabled conditional branch that was rendered to text.
        if LEGACY_SKIP_MARKER in value:
            return ValueKind.SKIP
        return ValueKind.SCALAR
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (RawFragment, Statement)):
        return ValueKind.FRAGMENT
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.SCALAR


def _render_value(value: Any, params: List[Any]) -> str:
    """Return the SQL text for ``value`` and append its bound values to ``params``."""

    kind = classify(value)

    if kind is ValueKind.SKIP or kind is ValueKind.NULL:
        return ""

    if kind is ValueKind.FRAGMENT:
        fragment = value.as_fragment() if isinstance(value, Statement) else value
        params.extend(fragment.params)
        return fragment.text

    if kind is ValueKind.SEQUENCE:
        params.extend(value)
        return format_placeholder_list(len(value))

    if kind is ValueKind.MAPPING:
        params.extend(value.values())
        return format_assignments(value.keys())

    if kind is ValueKind.SCALAR:
        params.append(value)
        return PLACEHOLDER

    raise AssertionError(f"Unhandled value kind: {kind}")  # pragma: no cover


def interpolate(segments: Sequence[str], values: Sequence[Any]) -> Statement:
    """Build a :class:`Statement` from template ``segments`` and ``values``.

    ``segments`` are the literal pieces of the template and ``values`` the
    expressions between them, so there is always exactly one more segment than
    there are values.  Each value is rendered according to :func:`classify`:

    * ``None`` and legacy skip markers contribute nothing.
    * :class:`RawFragment` and nested :class:`Statement` objects are spliced
      verbatim together with their own parameters.
    * Lists and tuples become ``(?, ?, ...)``.
    * Mappings become ``key = ?, key = ?`` in iteration order.
    * Everything else becomes a single ``?``.
    """

    if isinstance(segments, str):
        raise MalformedInputError("segments must be a sequence of strings, not a string")
    if not segments:
        raise MalformedInputError("a template needs at least one segment")
    if len(values) != len(segments) - 1:
        raise MalformedInputError(
            f"expected {len(segments) - 1} value(s) for {len(segments)} segment(s), "
            f"got {len(values)}"
        )

    params: List[Any] = []
    parts: List[str] = []
    for index, segment in enumerate(segments):
        parts.append(segment)
        if index < len(values):
            parts.append(_render_value(values[index], params))

    return Statement("".join(parts), params)


def sql(template: Any, *values: Any) -> Statement:
    """Tagged-template style entry point.

    ``template`` is either the literal segments, with the interpolated values
    passed positionally::

        sql(["SELECT * FROM users WHERE id IN ", ""], [1, 2, 3])

    or a template object exposing ``strings`` and ``values`` attributes, such
    as the ``t"..."`` strings of Python 3.14::

        sql(t"SELECT * FROM users WHERE id IN {ids}")
    """

    segments, template_values = _template_parts(template, values)
    return interpolate(segments, template_values)


def _template_parts(template: Any, values: Sequence[Any]) -> tuple[Sequence[str], Sequence[Any]]:
    if hasattr(template, "strings") and hasattr(template, "values"):
        if values:
            raise MalformedInputError("values cannot be passed alongside a template object")
        return template.strings, template.values
    if isinstance(template, Sequence):
        return template, values
    raise MalformedInputError(
        f"expected a template or a sequence of segments, got {type(template).__name__}"
    )


def when(condition: object, then: Any, otherwise: Any = None) -> Any:
    """Return ``then`` if ``condition`` is truthy, otherwise ``otherwise``.

    With the default ``otherwise`` of ``None`` a disabled branch contributes
    nothing to the surrounding statement::

        sql(["SELECT * FROM users", ""], when(active_only, raw(" WHERE active = 1")))
    """

    return then if condition else otherwise
