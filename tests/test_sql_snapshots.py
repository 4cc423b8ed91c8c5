"""Snapshot-style tests that assert complete generated statements remain stable."""

from __future__ import annotations

import pytest

from sqlter import (
    Statement,
    begin_transaction,
    case_when,
    escape,
    group_by,
    join,
    limit,
    order_by,
    raw,
    sql,
    when,
)


@pytest.fixture
def report_filters() -> dict[str, object]:
    """Fixture returning the inputs shared by the report query snapshots."""

    return {
        "statuses": ["active", "trial"],
        "min_total": 100,
        "name_prefix": "O'Brien",
    }


def test_report_query_snapshot(report_filters: dict[str, object]) -> None:
    statement = sql(
        [
            "SELECT users.id, ",
            " AS tier, COUNT(orders.id) AS orders FROM users ",
            " WHERE users.status IN ",
            " AND orders.total >= ",
            " AND ",
            " ",
            " ",
            " ",
            "",
        ],
        case_when("users.plan", {"gold": 3, "silver": 2}),
        join({"orders": "orders.user_id = users.id"}, "LEFT"),
        report_filters["statuses"],
        report_filters["min_total"],
        raw(f"users.name LIKE '{escape(str(report_filters['name_prefix']))}%'"),
        group_by(["users.id", "tier"]),
        order_by({"orders": "desc", "users.id": "asc"}),
        limit(25, 50),
    )

    expected_query = (
        "SELECT users.id, CASE WHEN users.plan = ? THEN ? WHEN users.plan = ? THEN ? END AS tier, "
        "COUNT(orders.id) AS orders FROM users LEFT JOIN orders ON orders.user_id = users.id "
        "WHERE users.status IN (?, ?) AND orders.total >= ? "
        "AND users.name LIKE 'O\\'Brien%' "
        "GROUP BY users.id, tier ORDER BY orders DESC, users.id ASC LIMIT ? OFFSET ?"
    )

    assert statement.query == expected_query
    assert statement.params == ["gold", 3, "silver", 2, "active", "trial", 100, 25, 50]


def test_update_with_optional_filter_snapshot() -> None:
    changes = {"name": "John", "email": "john@example.com", "active": True}

    def build(only_unverified: bool) -> Statement:
        return sql(
            ["UPDATE users SET ", " WHERE id = ", "", ""],
            changes,
            42,
            when(only_unverified, raw(" AND verified_at IS NULL")),
        )

    assert build(False) == Statement(
        "UPDATE users SET name = ?, email = ?, active = ? WHERE id = ?",
        ["John", "john@example.com", True, 42],
    )
    assert build(True) == Statement(
        "UPDATE users SET name = ?, email = ?, active = ? WHERE id = ? AND verified_at IS NULL",
        ["John", "john@example.com", True, 42],
    )


def test_transaction_snapshot() -> None:
    tx = begin_transaction()
    tx.add(["INSERT INTO users (name, email) VALUES ", ""], ["John", "john@example.com"])
    tx.add(["UPDATE accounts SET ", " WHERE user_id = ", ""], {"balance": 0}, 1)
    tx.add(["DELETE FROM sessions WHERE user_id IN ", ""], (1, 2))

    assert tx.commit() == Statement(
        "INSERT INTO users (name, email) VALUES (?, ?); "
        "UPDATE accounts SET balance = ? WHERE user_id = ?; "
        "DELETE FROM sessions WHERE user_id IN (?, ?)",
        ["John", "john@example.com", 0, 1, 1, 2],
    )
