"""Pydantic schemas for request/response validation.

Field names are snake_case in Python and camelCase on the wire.
Request models validate and normalise their own fields; a failing check
raises a ``PydanticCustomError`` whose message is returned to the client
verbatim as ``"<field>: <message>"``.
"""

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")

STUDENT_NAME_MIN, STUDENT_NAME_MAX = 3, 50
STUDENT_AGE_MIN, STUDENT_AGE_MAX = 15, 100
FACULTY_NAME_MIN, FACULTY_NAME_MAX = 3, 100

# Range of the INTEGER id and age columns
DB_INT_MIN, DB_INT_MAX = -(2**31), 2**31 - 1


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def _required_text(value: Optional[str], error_type: str, blank_message: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError(error_type, blank_message)
    return value.strip()


# ─── Student ─────────────────────────────────────────────────────────────────

class StudentWrite(CamelModel):
    """Body of POST /student and PUT /student/{id} (full replace)."""

    name: Optional[str] = Field(default=None, validate_default=True)
    age: Optional[int] = Field(default=None, validate_default=True)
    faculty_id: Optional[int] = Field(default=None, ge=DB_INT_MIN, le=DB_INT_MAX)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: Optional[str]) -> str:
        name = _required_text(value, "not_blank", "Student name is mandatory")
        if not STUDENT_NAME_MIN <= len(name) <= STUDENT_NAME_MAX:
            raise PydanticCustomError(
                "size", "Name must be between {min} and {max} characters",
                {"min": STUDENT_NAME_MIN, "max": STUDENT_NAME_MAX},
            )
        return name

    @field_validator("age")
    @classmethod
    def check_age(cls, value: Optional[int]) -> int:
        # A missing age counts as 0, like an unset primitive
        age = value if value is not None else 0
        if age < STUDENT_AGE_MIN:
            raise PydanticCustomError("min", "Student must be at least 15 years old")
        if age > STUDENT_AGE_MAX:
            raise PydanticCustomError("max", "Student age must be reasonable")
        return age


class StudentCreate(StudentWrite):
    pass


class StudentUpdate(StudentWrite):
    pass


class StudentResponse(CamelModel):
    id: int
    name: str
    age: int
    faculty_id: Optional[int] = None


# ─── Faculty ─────────────────────────────────────────────────────────────────

class FacultyWrite(CamelModel):
    """Body of POST /faculty and PUT /faculty/{id}."""

    name: Optional[str] = Field(default=None, validate_default=True)
    color: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: Optional[str]) -> str:
        name = _required_text(value, "not_blank", "Faculty Name is mandatory")
        if not FACULTY_NAME_MIN <= len(name) <= FACULTY_NAME_MAX:
            raise PydanticCustomError(
                "size", "Faculty Name must be between {min} and {max} characters",
                {"min": FACULTY_NAME_MIN, "max": FACULTY_NAME_MAX},
            )
        return name

    @field_validator("color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> str:
        color = _required_text(value, "not_blank", "Color is mandatory")
        if not HEX_COLOR_PATTERN.match(color):
            raise PydanticCustomError("pattern", "Color must be a valid hex color")
        return color


class FacultyCreate(FacultyWrite):
    pass


class FacultyUpdate(FacultyWrite):
    pass


class FacultyResponse(CamelModel):
    id: int
    name: str
    color: str
    student_ids: List[int] = []


# ─── Avatar ──────────────────────────────────────────────────────────────────

class AvatarInfoResponse(CamelModel):
    id: int
    file_path: str
    file_size: int
    media_type: Optional[str] = None
    student_id: int


class AvatarPreviewResponse(AvatarInfoResponse):
    preview_data: str  # base64-encoded preview bytes


class AvatarPageResponse(CamelModel):
    content: List[AvatarPreviewResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int


# ─── Errors ──────────────────────────────────────────────────────────────────

class ErrorResponse(CamelModel):
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
    details: List[str] = []
