from __future__ import annotations

from src.night_slip.night_slip.database import connection
from src.night_slip.night_slip.database.connection import DBConfig, DatabaseConnection


def test_config_from_settings_mapping_applies_defaults():
    cfg = DBConfig.from_mapping({"host": "db", "user": "slip", "password": "pw", "database": "night_slip"})

    assert cfg == DBConfig(host="db", port=3306, user="slip", password="pw", database="night_slip")


def test_each_factory_connects_with_its_own_config(monkeypatch):
    calls = []
    monkeypatch.setattr(connection.mysql.connector, "connect", lambda **kw: calls.append(kw) or object())

    first = DatabaseConnection(DBConfig(host="a", port=3306, user="u", password="p", database="one"))
    second = DatabaseConnection(DBConfig(host="b", port=3307, user="u", password="p", database="two"))
    first.connect()
    second.connect()

    assert [(c["host"], c["port"], c["database"]) for c in calls] == [("a", 3306, "one"), ("b", 3307, "two")]
    assert all(c["autocommit"] is False for c in calls)
