"""SQLAlchemy models package."""

from school.models.faculty import Faculty
from school.models.student import Student
from school.models.avatar import Avatar

__all__ = ["Faculty", "Student", "Avatar"]
