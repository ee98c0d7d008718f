"""Avatar model: one per student, preview bytes stored inline."""

from sqlalchemy import BigInteger, ForeignKey, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from school.core.database import Base


class Avatar(Base):
    __tablename__ = "avatars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    file_path: Mapped[str] = mapped_column(String(1000), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    media_type: Mapped[str] = mapped_column(String(100), nullable=True)
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    # Relationships
    student = relationship("Student", back_populates="avatar", lazy="raise")

    def __repr__(self) -> str:
        return f"Avatar(id={self.id}, student_id={self.student_id}, file_path={self.file_path!r})"
