"""Queries for the ``avatars`` table."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from school.models.avatar import Avatar


class AvatarRepository:
    """Repository for the avatars table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_student(self, student_id: int) -> Optional[Avatar]:
        result = await self.session.execute(select(Avatar).where(Avatar.student_id == student_id))
        return result.scalar_one_or_none()

    async def upsert(
        self,
        student_id: int,
        file_path: str,
        file_size: int,
        media_type: Optional[str],
        data: bytes,
    ) -> Avatar:
        """Create the student's avatar, or overwrite it in place if one already exists."""
        avatar = await self.get_by_student(student_id)

        if avatar is None:
            avatar = Avatar(student_id=student_id)
            self.session.add(avatar)

        avatar.file_path = file_path
        avatar.file_size = file_size
        avatar.media_type = media_type
        avatar.data = data

        await self.session.flush()
        await self.session.refresh(avatar)
        return avatar

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Avatar))
        return result.scalar() or 0

    async def list_page(self, offset: int, limit: int) -> List[Avatar]:
        result = await self.session.execute(
            select(Avatar).order_by(Avatar.id).offset(offset).limit(limit)
        )
        return list(result.scalars().all())

    async def list_all(self) -> List[Avatar]:
        result = await self.session.execute(select(Avatar).order_by(Avatar.id))
        return list(result.scalars().all())
