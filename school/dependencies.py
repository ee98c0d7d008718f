"""Per-request wiring of repositories and services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from school.core.config import settings
from school.core.database import get_db
from school.repositories import AvatarRepository, FacultyRepository, StudentRepository
from school.services.analytics_service import AnalyticsService
from school.services.avatar_service import AvatarService
from school.services.faculty_service import FacultyService
from school.services.name_printer import NamePrinter
from school.services.storage_service import LocalStorageService
from school.services.student_service import StudentService


# ─── Infrastructure ──────────────────────────────────────────────────────────

def get_avatar_storage() -> LocalStorageService:
    """Storage rooted at the configured avatars directory."""
    return LocalStorageService(settings.AVATARS_DIR)


def get_name_printer() -> NamePrinter:
    return NamePrinter()


# ─── Services ────────────────────────────────────────────────────────────────

def get_student_service(db: AsyncSession = Depends(get_db)) -> StudentService:
    return StudentService(StudentRepository(db), FacultyRepository(db))


def get_faculty_service(db: AsyncSession = Depends(get_db)) -> FacultyService:
    return FacultyService(FacultyRepository(db), StudentRepository(db))


def get_avatar_service(
    db: AsyncSession = Depends(get_db),
    storage: LocalStorageService = Depends(get_avatar_storage),
) -> AvatarService:
    student_service = StudentService(StudentRepository(db), FacultyRepository(db))
    return AvatarService(AvatarRepository(db), student_service, storage)


def get_analytics_service(db: AsyncSession = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(StudentRepository(db), FacultyRepository(db))
