"""Seed the database with demo faculties and students.

Usage:
    python -m school.scripts.seed_demo_data

Does nothing if any student already exists.
"""

import asyncio

from sqlalchemy import func, select

from school.core.database import Base, async_session, engine
from school.models import Faculty, Student

FACULTIES = [
    ("Gryffindor", "#FF0000"),
    ("Slytherin", "#00FF00"),
    ("Ravenclaw", "#0000FF"),
    ("Hufflepuff", "#FFFF00"),
]

STUDENTS = [
    ("Harry Potter", 17, "Gryffindor"),
    ("Hermione Granger", 17, "Gryffindor"),
    ("Ron Weasley", 17, "Gryffindor"),
    ("Draco Malfoy", 17, "Slytherin"),
    ("Luna Lovegood", 16, "Ravenclaw"),
    ("Cedric Diggory", 18, "Hufflepuff"),
]


async def seed(session_factory=async_session) -> int:
    """Insert the demo rows. Returns the number of students created."""
    async with session_factory() as session:
        existing = await session.execute(select(func.count()).select_from(Student))
        if existing.scalar():
            print("Students already exist, skipping seed")
            return 0

        faculties = {name: Faculty(name=name, color=color) for name, color in FACULTIES}
        session.add_all(faculties.values())
        await session.flush()

        session.add_all(
            Student(name=name, age=age, faculty_id=faculties[faculty].id)
            for name, age, faculty in STUDENTS
        )
        await session.commit()

    print(f"Seeded {len(FACULTIES)} faculties and {len(STUDENTS)} students")
    return len(STUDENTS)


async def main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await seed()


if __name__ == "__main__":
    asyncio.run(main())
