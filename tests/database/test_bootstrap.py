from __future__ import annotations

from pathlib import Path

from src.user_api.user_api.database.bootstrap import _strip_create_db_and_use, as_target, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"
    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_schema_file_has_only_users_table_after_strip():
    stmts = list(iter_sql_statements(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))))

    assert len(stmts) == 1
    assert stmts[0].startswith("CREATE TABLE IF NOT EXISTS users")
    for column in ("id INT", "username VARCHAR", "password VARCHAR"):
        assert column in stmts[0]


def test_target_description_has_no_password():
    target = as_target({"host": "db", "port": "3307", "user": "app", "password": "s3cret", "database": "users"})
    assert target.port == 3307
    assert target.describe() == "app@db:3307/users"
