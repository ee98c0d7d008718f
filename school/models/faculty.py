"""Faculty model."""

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from school.core.database import Base


class Faculty(Base):
    __tablename__ = "faculties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False)

    # Relationships (always loaded explicitly)
    students: Mapped[List["Student"]] = relationship(
        "Student", back_populates="faculty", lazy="raise", order_by="Student.id"
    )

    def __repr__(self) -> str:
        return f"Faculty(id={self.id}, name={self.name!r}, color={self.color!r})"
