"""Queries for the ``faculties`` table.

Every read eagerly loads ``Faculty.students`` so the mapper can list student
ids without touching the database again.
"""

from typing import List, Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from school.models.faculty import Faculty


class FacultyRepository:
    """Repository for the faculties table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self):
        return (
            select(Faculty)
            .options(selectinload(Faculty.students))
            .execution_options(populate_existing=True)
        )

    # ── CREATE / UPDATE / DELETE ─────────────────────────

    async def add(self, faculty: Faculty) -> Faculty:
        self.session.add(faculty)
        await self.session.flush()
        return faculty

    async def save(self, faculty: Faculty) -> Faculty:
        await self.session.flush()
        return faculty

    async def delete(self, faculty_id: int) -> None:
        await self.session.execute(delete(Faculty).where(Faculty.id == faculty_id))

    # ── READ ─────────────────────────────────────────────

    async def get(self, faculty_id: int) -> Optional[Faculty]:
        result = await self.session.execute(self._select().where(Faculty.id == faculty_id))
        return result.scalar_one_or_none()

    async def exists(self, faculty_id: int) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(Faculty).where(Faculty.id == faculty_id)
        )
        return bool(result.scalar())

    async def list_all(self) -> List[Faculty]:
        result = await self.session.execute(self._select().order_by(Faculty.id))
        return list(result.scalars().all())

    async def list_by_color(self, color: str) -> List[Faculty]:
        result = await self.session.execute(
            self._select()
            .where(func.lower(Faculty.color) == color.lower())
            .order_by(Faculty.id)
        )
        return list(result.scalars().all())

    async def list_by_name_or_color(self, value: str) -> List[Faculty]:
        needle = value.lower()
        result = await self.session.execute(
            self._select()
            .where(or_(func.lower(Faculty.name) == needle, func.lower(Faculty.color) == needle))
            .order_by(Faculty.id)
        )
        return list(result.scalars().all())

    async def list_names(self) -> List[str]:
        result = await self.session.execute(select(Faculty.name).order_by(Faculty.id))
        return list(result.scalars().all())
