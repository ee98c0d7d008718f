"""Entity → response schema conversion.

Relations never leak onto the wire: a student exposes only ``faculty_id``,
a faculty only the ids of its students.
"""

import base64
from typing import Iterable, List

from school.models import Avatar, Faculty, Student
from school.schemas import (
    AvatarInfoResponse,
    AvatarPreviewResponse,
    FacultyResponse,
    StudentResponse,
)


def student_to_response(student: Student) -> StudentResponse:
    return StudentResponse(
        id=student.id,
        name=student.name,
        age=student.age,
        faculty_id=student.faculty_id,
    )


def students_to_response(students: Iterable[Student]) -> List[StudentResponse]:
    return [student_to_response(s) for s in students]


def faculty_to_response(faculty: Faculty) -> FacultyResponse:
    """Requires ``faculty.students`` to be loaded."""
    return FacultyResponse(
        id=faculty.id,
        name=faculty.name,
        color=faculty.color,
        student_ids=[s.id for s in faculty.students],
    )


def faculties_to_response(faculties: Iterable[Faculty]) -> List[FacultyResponse]:
    return [faculty_to_response(f) for f in faculties]


def avatar_to_info(avatar: Avatar) -> AvatarInfoResponse:
    return AvatarInfoResponse(
        id=avatar.id,
        file_path=avatar.file_path,
        file_size=avatar.file_size,
        media_type=avatar.media_type,
        student_id=avatar.student_id,
    )


def avatar_to_preview(avatar: Avatar) -> AvatarPreviewResponse:
    return AvatarPreviewResponse(
        **avatar_to_info(avatar).model_dump(),
        preview_data=base64.b64encode(avatar.data or b"").decode("utf-8"),
    )
