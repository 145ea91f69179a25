"""
Service layer for student records.

``StudentService`` owns the ``students`` table and provides the five
CRUD operations used by the API.  Every query is a parameterized
statement.  The methods block; the API calls them from plain ``def``
endpoints, which FastAPI runs in its threadpool.  A fresh connection
is opened for each operation so no connection crosses threads, and
SQLite serializes concurrent writers.

Lookups, updates and deletes that match no row raise
``StudentNotFoundError``.  Driver errors, including the unique
constraint on ``email``, are left to propagate as ``sqlite3.Error``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from students_api.app.core.db import get_connection
from students_api.app.schemas.student import StudentRead

logger = logging.getLogger(__name__)


class StudentNotFoundError(LookupError):
    """Raised when no student row matches the requested id."""

    def __init__(self, student_id: int) -> None:
        self.student_id = student_id
        super().__init__(f"no student found with id {student_id}")


class StudentService:
    """Store for student records backed by a single SQLite file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def create_student(self, name: str, email: str, age: int) -> int:
        """Insert a new student and return the id assigned by the database."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO students (name, email, age) VALUES (?, ?, ?)",
                (name, email, age),
            )
            student_id = cursor.lastrowid
            conn.commit()
            logger.info("Created student %s", student_id)
            return student_id
        finally:
            conn.close()

    def get_student(self, student_id: int) -> StudentRead:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT id, name, email, age FROM students WHERE id = ? LIMIT 1",
                (student_id,),
            ).fetchone()
            if row is None:
                raise StudentNotFoundError(student_id)
            return self._row_to_student_read(row)
        finally:
            conn.close()

    def list_students(self) -> List[StudentRead]:
        """Return every student ordered by id; an empty list if there are none."""
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT id, name, email, age FROM students ORDER BY id ASC"
            ).fetchall()
            return [self._row_to_student_read(row) for row in rows]
        finally:
            conn.close()

    def update_student(self, student_id: int, name: str, email: str, age: int) -> None:
        """Replace name, email and age of an existing student."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE students SET name = ?, email = ?, age = ? WHERE id = ?",
                (name, email, age, student_id),
            )
            affected = cursor.rowcount
            conn.commit()
            if affected == 0:
                raise StudentNotFoundError(student_id)
            logger.info("Updated student %s", student_id)
        finally:
            conn.close()

    def delete_student(self, student_id: int) -> None:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM students WHERE id = ?", (student_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected == 0:
                raise StudentNotFoundError(student_id)
            logger.info("Deleted student %s", student_id)
        finally:
            conn.close()

    @staticmethod
    def _row_to_student_read(row: sqlite3.Row) -> StudentRead:
        """Convert a database row to a StudentRead schema instance."""
        return StudentRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            age=row["age"],
        )
