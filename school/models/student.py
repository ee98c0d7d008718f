"""Student model."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from school.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    faculty_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("faculties.id"), nullable=True, index=True
    )

    # Relationships
    faculty: Mapped[Optional["Faculty"]] = relationship(
        "Faculty", back_populates="students", lazy="raise"
    )
    avatar: Mapped[Optional["Avatar"]] = relationship(
        "Avatar", back_populates="student", lazy="raise", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"Student(id={self.id}, name={self.name!r}, age={self.age})"
