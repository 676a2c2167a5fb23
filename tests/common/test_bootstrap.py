from mess_attendance.config import get_settings_module
from mess_attendance.database.bootstrap import SCHEMA_PATH, _iter_sql_statements, _strip_comments, _strip_create_db_and_use


def test_schema_splits_into_table_statements():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8")))
    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 2
    assert "UNIQUE KEY uq_meal_attendance_user_day (user_id, day)" in statements[1]


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "CREATE DATABASE x;\nUSE x;\nINSERT INTO t VALUES ('a;b');\nSELECT 1"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "mess_attendance.config.production"
    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "mess_attendance.config.testing"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "mess_attendance.config.development"
