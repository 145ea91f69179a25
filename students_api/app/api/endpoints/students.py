"""
Student endpoints.

These routes expose CRUD operations on student records.  Request
bodies are validated against ``StudentCreate``/``StudentUpdate`` and
path ids must be positive integers that fit an SQLite INTEGER;
anything else is rejected with a 400 by the validation handler in
``core.errors``.  Store failures, including unknown ids and duplicate
emails, surface as 500.

The handlers are plain functions because the store blocks on
``sqlite3``; FastAPI runs them in its threadpool.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Request, status

from students_api.app.schemas.student import (
    SQLITE_INTEGER_MAX,
    Message,
    StudentCreate,
    StudentCreated,
    StudentRead,
    StudentUpdate,
)
from students_api.app.services.student_service import StudentService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_student_service(request: Request) -> StudentService:
    """Return the store created by ``create_app`` for this application."""
    return request.app.state.student_service


@router.post("", response_model=StudentCreated, status_code=status.HTTP_201_CREATED)
def create_student(
    student_in: StudentCreate,
    service: StudentService = Depends(get_student_service),
) -> StudentCreated:
    logger.info("Create a student")
    student_id = service.create_student(student_in.name, student_in.email, student_in.age)
    return StudentCreated(id=student_id)


@router.get("", response_model=List[StudentRead])
def list_students(
    service: StudentService = Depends(get_student_service),
) -> List[StudentRead]:
    """Return all students; an empty list when there are none."""
    logger.info("Get student list")
    return service.list_students()


@router.get("/{id}", response_model=StudentRead)
def get_student(
    student_id: int = Path(..., alias="id", gt=0, le=SQLITE_INTEGER_MAX),
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    return service.get_student(student_id)


@router.put("/{id}", response_model=Message)
def update_student(
    student_in: StudentUpdate,
    student_id: int = Path(..., alias="id", gt=0, le=SQLITE_INTEGER_MAX),
    service: StudentService = Depends(get_student_service),
) -> Message:
    """Replace name, email and age of an existing student."""
    service.update_student(student_id, student_in.name, student_in.email, student_in.age)
    return Message(message="student updated successfully")


@router.delete("/{id}", response_model=Message)
def delete_student(
    student_id: int = Path(..., alias="id", gt=0, le=SQLITE_INTEGER_MAX),
    service: StudentService = Depends(get_student_service),
) -> Message:
    service.delete_student(student_id)
    return Message(message="student deleted successfully")
