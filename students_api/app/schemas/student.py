"""
Pydantic schemas for student records.

A student is a flat record of a name, a unique email address and an
age.  The ``id`` is assigned by the database and only appears on the
read side.

Zero values (``""`` for strings, ``0`` for the age) count as missing
and are reported with the same ``missing`` error type pydantic uses
for absent fields.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

# Range of an SQLite INTEGER; the driver cannot bind anything outside it.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


class StudentBase(BaseModel):
    name: str = Field(..., examples=["Jane Doe"])
    email: str = Field(..., examples=["jane@example.com"])
    # Strict so that "21" or 21.5 is rejected instead of being coerced.
    age: int = Field(
        ...,
        ge=SQLITE_INTEGER_MIN,
        le=SQLITE_INTEGER_MAX,
        strict=True,
        examples=[21],
    )

    @field_validator("name", "email", "age")
    @classmethod
    def reject_zero_value(cls, value):
        if value == "" or value == 0:
            raise PydanticCustomError("missing", "Field required")
        return value


class StudentCreate(StudentBase):
    """Schema for creating a student."""


class StudentUpdate(StudentBase):
    """Schema for replacing a student's name, email and age.

    All fields are required; updates are not partial.
    """


class StudentRead(StudentBase):
    """Schema for reading a student from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class StudentCreated(BaseModel):
    id: int


class Message(BaseModel):
    message: str
