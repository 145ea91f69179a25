import sqlite3

import pytest

from students_api.app.services.student_service import StudentNotFoundError


def test_create_student_returns_positive_id_and_is_retrievable(service):
    student_id = service.create_student("Jane Doe", "jane@example.com", 21)

    assert student_id > 0
    student = service.get_student(student_id)
    assert student.id == student_id
    assert student.name == "Jane Doe"
    assert student.email == "jane@example.com"
    assert student.age == 21


def test_create_student_with_duplicate_email_fails(service):
    service.create_student("Jane Doe", "jane@example.com", 21)

    with pytest.raises(sqlite3.IntegrityError):
        service.create_student("Another Jane", "jane@example.com", 30)

    assert len(service.list_students()) == 1


def test_get_missing_student_raises_not_found(service):
    with pytest.raises(StudentNotFoundError) as excinfo:
        service.get_student(42)

    assert excinfo.value.student_id == 42
    assert str(excinfo.value) == "no student found with id 42"


def test_list_students_is_empty_without_records(service):
    assert service.list_students() == []


def test_list_students_is_ordered_by_id(service):
    first = service.create_student("A", "a@example.com", 20)
    second = service.create_student("B", "b@example.com", 22)

    students = service.list_students()

    assert [s.id for s in students] == [first, second]


def test_update_student_is_reflected_in_reads(service):
    student_id = service.create_student("Jane Doe", "jane@example.com", 21)

    service.update_student(student_id, "Jane Smith", "smith@example.com", 22)

    student = service.get_student(student_id)
    assert (student.name, student.email, student.age) == ("Jane Smith", "smith@example.com", 22)


def test_update_missing_student_raises_not_found(service):
    with pytest.raises(StudentNotFoundError):
        service.update_student(7, "Nobody", "nobody@example.com", 30)


def test_update_to_taken_email_fails(service):
    service.create_student("A", "a@example.com", 20)
    second = service.create_student("B", "b@example.com", 22)

    with pytest.raises(sqlite3.IntegrityError):
        service.update_student(second, "B", "a@example.com", 22)

    assert service.get_student(second).email == "b@example.com"


def test_delete_student_removes_it_from_list(service):
    keep = service.create_student("A", "a@example.com", 20)
    drop = service.create_student("B", "b@example.com", 22)

    service.delete_student(drop)

    assert [s.id for s in service.list_students()] == [keep]
    with pytest.raises(StudentNotFoundError):
        service.get_student(drop)


def test_delete_missing_student_raises_not_found(service):
    with pytest.raises(StudentNotFoundError):
        service.delete_student(99)


def test_ids_are_not_reused_after_delete(service):
    first = service.create_student("A", "a@example.com", 20)
    service.delete_student(first)

    second = service.create_student("A", "a@example.com", 20)

    assert second > first


def test_age_at_sqlite_integer_bounds_round_trips(service):
    student_id = service.create_student("Old", "old@example.com", 2**63 - 1)

    assert service.get_student(student_id).age == 2**63 - 1
