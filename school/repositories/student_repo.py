"""Queries for the ``students`` table."""

from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from school.models.avatar import Avatar
from school.models.faculty import Faculty
from school.models.student import Student


class StudentRepository:
    """Repository for the students table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ── CREATE / UPDATE / DELETE ─────────────────────────

    async def add(self, student: Student) -> Student:
        self.session.add(student)
        await self.session.flush()
        await self.session.refresh(student)
        return student

    async def save(self, student: Student) -> Student:
        """Flush pending changes of an already persistent student."""
        await self.session.flush()
        return student

    async def delete(self, student_id: int) -> None:
        # The avatar goes with its student; the file on disk is left alone
        await self.session.execute(delete(Avatar).where(Avatar.student_id == student_id))
        await self.session.execute(delete(Student).where(Student.id == student_id))

    async def clear_faculty(self, faculty_id: int) -> int:
        """Detach every student from a faculty. Returns the number of rows touched."""
        result = await self.session.execute(
            update(Student)
            .where(Student.faculty_id == faculty_id)
            .values(faculty_id=None)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    # ── READ ─────────────────────────────────────────────

    async def get(self, student_id: int) -> Optional[Student]:
        result = await self.session.execute(select(Student).where(Student.id == student_id))
        return result.scalar_one_or_none()

    async def get_with_faculty(self, student_id: int) -> Optional[Student]:
        """Fetch a student with its faculty (and the faculty's students) loaded."""
        result = await self.session.execute(
            select(Student)
            .where(Student.id == student_id)
            .options(selectinload(Student.faculty).selectinload(Faculty.students))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Student]:
        result = await self.session.execute(select(Student).order_by(Student.id))
        return list(result.scalars().all())

    async def list_by_age(self, age: int) -> List[Student]:
        result = await self.session.execute(
            select(Student).where(Student.age == age).order_by(Student.id)
        )
        return list(result.scalars().all())

    async def list_by_age_between(self, min_age: int, max_age: int) -> List[Student]:
        result = await self.session.execute(
            select(Student)
            .where(Student.age.between(min_age, max_age))
            .order_by(Student.id)
        )
        return list(result.scalars().all())

    async def list_by_faculty(self, faculty_id: int) -> List[Student]:
        result = await self.session.execute(
            select(Student).where(Student.faculty_id == faculty_id).order_by(Student.id)
        )
        return list(result.scalars().all())

    async def list_names(self) -> List[str]:
        result = await self.session.execute(select(Student.name).order_by(Student.id))
        return list(result.scalars().all())

    async def list_ages(self) -> List[int]:
        result = await self.session.execute(select(Student.age))
        return list(result.scalars().all())

    # ── AGGREGATES ───────────────────────────────────────

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Student))
        return result.scalar() or 0

    async def average_age(self) -> Optional[float]:
        result = await self.session.execute(select(func.avg(Student.age)))
        value = result.scalar()
        return float(value) if value is not None else None

    async def last(self, limit: int = 5) -> List[Student]:
        result = await self.session.execute(
            select(Student).order_by(Student.id.desc()).limit(limit)
        )
        return list(result.scalars().all())
