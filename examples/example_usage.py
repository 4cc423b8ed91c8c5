import sqlite3

from sqlter import begin_transaction, group_by, limit, order_by, sql, when

USERS = [("Ada", "eng", 1), ("Grace", "eng", 1), ("Linus", "ops", 0)]

connection = sqlite3.connect(":memory:")
connection.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, department TEXT, active INTEGER)")

with connection:
    for row in USERS:
        connection.execute(*sql(["INSERT INTO users (name, department, active) VALUES ", ""], row))

active_only = True
report = sql(
    ["SELECT department, COUNT(*) FROM users", " ", " ", " ", ""],
    when(active_only, sql([" WHERE active = ", ""], 1)),
    group_by("department"),
    order_by({"department": "asc"}),
    limit(10),
)
print(report.query)
print(connection.execute(*report).fetchall())

# sqlite3 runs one statement per execute(); a combined batch suits drivers
# that accept several statements at once.
tx = begin_transaction()
tx.add(["UPDATE users SET ", " WHERE name = ", ""], {"department": "research"}, "Ada")
tx.add(["DELETE FROM users WHERE active = ", ""], 0)
print(tx.commit())
