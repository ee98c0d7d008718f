"""
Data access layer.

Each repository wraps one AsyncSession and owns every query for its table.
Lookups return ``None`` when a row is missing; deciding whether that is an
error is left to the services.
"""

from school.repositories.avatar_repo import AvatarRepository
from school.repositories.faculty_repo import FacultyRepository
from school.repositories.student_repo import StudentRepository

__all__ = ["AvatarRepository", "FacultyRepository", "StudentRepository"]
