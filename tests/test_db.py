import sqlite3

import pytest

from students_api.app.core.config import Settings
from students_api.app.core.db import MIGRATIONS, get_cursor, get_database_path, init_db


def test_get_database_path_creates_parent_directory(tmp_path):
    settings = Settings(storage_path=str(tmp_path / "nested" / "dir" / "students.db"))

    db_path = get_database_path(settings)

    assert db_path == str((tmp_path / "nested" / "dir" / "students.db").resolve())
    assert (tmp_path / "nested" / "dir").is_dir()


def test_init_db_applies_migrations_once(tmp_path):
    db_path = str(tmp_path / "students.db")
    latest = MIGRATIONS[-1][0]

    assert init_db(db_path) == latest
    assert init_db(db_path) == latest

    with get_cursor(db_path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
        columns = [row["name"] for row in cursor.execute("PRAGMA table_info(students)")]
    assert versions == [version for version, _ in MIGRATIONS]
    assert columns == ["id", "name", "email", "age"]


def test_students_email_is_unique(tmp_path):
    db_path = str(tmp_path / "students.db")
    init_db(db_path)

    conn = sqlite3.connect(db_path)
    try:
        conn.execute("INSERT INTO students (name, email, age) VALUES ('A', 'a@example.com', 20)")
        with pytest.raises(sqlite3.IntegrityError, match="UNIQUE"):
            conn.execute("INSERT INTO students (name, email, age) VALUES ('B', 'a@example.com', 21)")
    finally:
        conn.close()


def test_settings_address():
    assert Settings(host="127.0.0.1", port=9000).address == "127.0.0.1:9000"
