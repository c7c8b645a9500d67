from __future__ import annotations

from datetime import time, timedelta

from attendance_tracker.database.bootstrap import (
    DEMO_ROSTER,
    _iter_sql_statements,
    _strip_create_db_and_use,
    apply_schema,
    seed_demo_roster,
)
from attendance_tracker.database.mysql_base import mysql_time_to_hhmm
from attendance_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository


class FakeCursor:
    def __init__(self, log):
        self._log = log

    def execute(self, stmt):
        self._log.append(stmt)


class FakeConnection:
    def __init__(self, log):
        self._log = log
        self.committed = False

    def cursor(self):
        return FakeCursor(self._log)

    def commit(self):
        self.committed = True

    def close(self):
        pass


class FakeConnFactory:
    database = "attendance_test"

    def __init__(self):
        self.executed = []
        self.with_database = []

    def connect(self, *, with_database=True):
        self.with_database.append(with_database)
        return FakeConnection(self.executed)


def test_split_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nSELECT 1;\n  \nSELECT \"x;y\""

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        "SELECT 1",
        'SELECT "x;y"',
    ]


def test_strip_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS other;\nUSE other;\nCREATE TABLE t (id INT);"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_apply_schema_targets_configured_database(tmp_path):
    schema = tmp_path / "schema.sql"
    schema.write_text("CREATE DATABASE x;\nUSE x;\nCREATE TABLE a (id INT);\nCREATE TABLE b (id INT);\n")
    factory = FakeConnFactory()

    apply_schema(factory, schema_path=schema)

    assert factory.with_database == [False, True]
    assert "`attendance_test`" in factory.executed[0]
    assert factory.executed[1:] == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]


def test_seed_demo_roster_only_once():
    repo = InMemoryEmployeeRepository()

    assert seed_demo_roster(repo) == len(DEMO_ROSTER)
    assert seed_demo_roster(repo) == 0
    assert [e.employee_id for e in repo.list_all()] == [str(i) for i in range(1, len(DEMO_ROSTER) + 1)]
    assert repo.get_by_id("1").allocated_hours == "08:30"


def test_mysql_time_values_normalize_to_hhmm():
    assert mysql_time_to_hhmm(None) is None
    assert mysql_time_to_hhmm(time(9, 5)) == "09:05"
    assert mysql_time_to_hhmm(timedelta(hours=21)) == "21:00"
    assert mysql_time_to_hhmm("8:30:00") == "08:30"
