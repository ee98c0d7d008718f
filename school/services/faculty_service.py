"""Faculty use cases, including the detach-then-delete cascade."""

from typing import List

from school.core.exceptions import FacultyNotFoundError
from school.core.logging import logger
from school.mappers import faculties_to_response, faculty_to_response, students_to_response
from school.models import Faculty
from school.repositories import FacultyRepository, StudentRepository
from school.schemas import FacultyCreate, FacultyResponse, FacultyUpdate, StudentResponse


class FacultyService:
    """Create, read, update and delete faculties."""

    def __init__(self, faculties: FacultyRepository, students: StudentRepository):
        self.faculties = faculties
        self.students = students

    async def get_entity(self, faculty_id: int) -> Faculty:
        faculty = await self.faculties.get(faculty_id)
        if faculty is None:
            logger.error(f"Faculty not found with ID: {faculty_id}")
            raise FacultyNotFoundError.by_id(faculty_id)
        return faculty

    async def create(self, data: FacultyCreate) -> FacultyResponse:
        logger.info(f"Was invoked method for CREATE Faculty with name: {data.name}")

        faculty = await self.faculties.add(Faculty(name=data.name, color=data.color, students=[]))

        logger.info(f"Faculty created with ID: {faculty.id} and name: {faculty.name}")
        return faculty_to_response(faculty)

    async def get(self, faculty_id: int) -> FacultyResponse:
        logger.info(f"Was invoked method for FIND Faculty by ID: {faculty_id}")
        return faculty_to_response(await self.get_entity(faculty_id))

    async def update(self, faculty_id: int, data: FacultyUpdate) -> FacultyResponse:
        logger.info(f"Was invoked method for UPDATE Faculty with ID: {faculty_id}")
        logger.debug(f"UPDATE Faculty data - name: {data.name}, color: {data.color}")

        faculty = await self.get_entity(faculty_id)
        faculty.name = data.name
        faculty.color = data.color
        faculty = await self.faculties.save(faculty)

        logger.info(f"Faculty with ID: {faculty_id} updated")
        return faculty_to_response(faculty)

    async def delete(self, faculty_id: int) -> FacultyResponse:
        """Detach the faculty's students, then remove the faculty.

        Both statements share the caller's transaction, so either the
        students are detached and the faculty is gone, or nothing changed.
        Returns the faculty as it was before deletion.
        """
        logger.info(f"Was invoked method for DELETE Faculty with ID: {faculty_id}")

        faculty = await self.get_entity(faculty_id)
        deleted = faculty_to_response(faculty)

        if deleted.student_ids:
            detached = await self.students.clear_faculty(faculty_id)
            logger.info(f"Removed Faculty association from {detached} students")
        else:
            logger.debug(f"No students associated with Faculty ID: {faculty_id}")

        await self.faculties.delete(faculty_id)

        logger.info(f"Faculty deleted with ID: {faculty_id} and name: {deleted.name}")
        return deleted

    async def list_all(self) -> List[FacultyResponse]:
        logger.info("Was invoked method for GET ALL faculties")
        return faculties_to_response(await self.faculties.list_all())

    async def list_by_color(self, color: str) -> List[FacultyResponse]:
        logger.info(f"Was invoked method for GET faculties filtered by color: {color}")
        faculties = await self.faculties.list_by_color(color)
        logger.debug(f"Found {len(faculties)} faculties with color: {color}")
        return faculties_to_response(faculties)

    async def search(self, name_or_color: str) -> List[FacultyResponse]:
        logger.info(f"Was invoked method for GET faculties by name or color: {name_or_color}")
        return faculties_to_response(await self.faculties.list_by_name_or_color(name_or_color))

    async def list_students(self, faculty_id: int) -> List[StudentResponse]:
        logger.info(f"Was invoked method for GET students of Faculty with ID: {faculty_id}")

        if not await self.faculties.exists(faculty_id):
            logger.error(f"Faculty not found with ID: {faculty_id}")
            raise FacultyNotFoundError.by_id(faculty_id)

        students = await self.students.list_by_faculty(faculty_id)
        logger.debug(f"Found {len(students)} students for Faculty with ID: {faculty_id}")
        return students_to_response(students)
