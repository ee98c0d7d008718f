"""Student use cases."""

from typing import List, Optional

from school.core.exceptions import FacultyNotFoundError, StudentNotFoundError
from school.core.logging import logger
from school.mappers import faculty_to_response, student_to_response, students_to_response
from school.models import Faculty, Student
from school.repositories import FacultyRepository, StudentRepository
from school.schemas import FacultyResponse, StudentCreate, StudentResponse, StudentUpdate

LAST_STUDENTS_LIMIT = 5


class StudentService:
    """Create, read, update and delete students, plus their aggregates."""

    def __init__(self, students: StudentRepository, faculties: FacultyRepository):
        self.students = students
        self.faculties = faculties

    async def _resolve_faculty(self, faculty_id: Optional[int]) -> Optional[Faculty]:
        if faculty_id is None:
            return None
        faculty = await self.faculties.get(faculty_id)
        if faculty is None:
            logger.error(f"Faculty not found with ID: {faculty_id}")
            raise FacultyNotFoundError.by_id(faculty_id)
        return faculty

    async def get_entity(self, student_id: int) -> Student:
        student = await self.students.get(student_id)
        if student is None:
            logger.error(f"There is no Student with ID: {student_id}")
            raise StudentNotFoundError(student_id)
        return student

    # ── CRUD ─────────────────────────────────────────────

    async def create(self, data: StudentCreate) -> StudentResponse:
        logger.info(f"Was invoked method for CREATE Student with name: {data.name}")

        faculty = await self._resolve_faculty(data.faculty_id)
        student = Student(
            name=data.name,
            age=data.age,
            faculty_id=faculty.id if faculty else None,
        )
        student = await self.students.add(student)

        logger.info(f"Student created with ID: {student.id} and name: {student.name}")
        return student_to_response(student)

    async def get(self, student_id: int) -> StudentResponse:
        logger.info(f"Was invoked method for FIND Student by ID: {student_id}")
        return student_to_response(await self.get_entity(student_id))

    async def update(self, student_id: int, data: StudentUpdate) -> StudentResponse:
        """Full replace: an omitted faculty id detaches the student from its faculty."""
        logger.info(f"Was invoked method for UPDATE Student with ID: {student_id}")

        student = await self.get_entity(student_id)
        faculty = await self._resolve_faculty(data.faculty_id)

        student.name = data.name
        student.age = data.age
        student.faculty_id = faculty.id if faculty else None
        if faculty is None:
            logger.debug(f"Clearing Faculty of Student with ID: {student_id}")

        student = await self.students.save(student)
        logger.info(f"Student with ID: {student_id} updated, new name: {student.name}")
        return student_to_response(student)

    async def delete(self, student_id: int) -> StudentResponse:
        logger.info(f"Was invoked method for DELETE Student by ID: {student_id}")

        student = await self.get_entity(student_id)
        deleted = student_to_response(student)
        await self.students.delete(student_id)

        logger.info(f"Student deleted: {deleted.id} ({deleted.name})")
        return deleted

    # ── Listing / filtering ──────────────────────────────

    async def list_all(self) -> List[StudentResponse]:
        logger.info("Was invoked method for GET all students")
        students = await self.students.list_all()
        logger.debug(f"Retrieved {len(students)} students from database")
        return students_to_response(students)

    async def list_by_age(self, age: int) -> List[StudentResponse]:
        logger.info(f"Was invoked method for GET students by age: {age}")
        return students_to_response(await self.students.list_by_age(age))

    async def list_by_age_between(self, min_age: int, max_age: int) -> List[StudentResponse]:
        """Inclusive range; an inverted range simply matches nothing."""
        logger.info(f"Was invoked method for GET students by age between {min_age} and {max_age}")
        students = await self.students.list_by_age_between(min_age, max_age)
        logger.debug(f"Found {len(students)} students in age range {min_age}-{max_age}")
        return students_to_response(students)

    async def list_names(self) -> List[str]:
        return await self.students.list_names()

    # ── Aggregates ───────────────────────────────────────

    async def count(self) -> int:
        logger.info("Was invoked method for GET total count of students")
        return await self.students.count()

    async def average_age(self) -> Optional[float]:
        logger.info("Was invoked method for GET average age of students")
        average = await self.students.average_age()
        logger.debug(f"Average students age: {average}")
        return average

    async def last_five(self) -> List[StudentResponse]:
        logger.info("Was invoked method for GET last five students")
        return students_to_response(await self.students.last(LAST_STUDENTS_LIMIT))

    # ── Relations ────────────────────────────────────────

    async def get_faculty(self, student_id: int) -> FacultyResponse:
        logger.info(f"Was invoked method for GET Faculty of Student with ID: {student_id}")

        student = await self.students.get_with_faculty(student_id)
        if student is None:
            logger.error(f"Student not found with ID: {student_id}")
            raise StudentNotFoundError(student_id)

        if student.faculty is None:
            logger.warning(f"Student with ID: {student_id} has no Faculty assigned")
            raise FacultyNotFoundError.for_student_without_faculty(student_id)

        return faculty_to_response(student.faculty)
