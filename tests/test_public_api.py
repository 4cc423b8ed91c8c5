"""Tests for the public package API exports."""

from typing import get_args

import sqlter
from sqlter import JoinType, OrderDirection


def test_join_types_are_exposed() -> None:
    """JoinType should be available from the top-level package."""

    assert set(get_args(JoinType)) == {"INNER", "LEFT", "RIGHT", "FULL"}
    assert set(get_args(OrderDirection)) == {"ASC", "DESC"}


def test_all_names_are_importable() -> None:
    for name in sqlter.__all__:
        assert hasattr(sqlter, name), name


def test_version_is_a_string() -> None:
    assert isinstance(sqlter.__version__, str)
