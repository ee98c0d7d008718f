"""Student endpoints."""

import asyncio
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import PlainTextResponse

from school.core.logging import logger
from school.dependencies import get_name_printer, get_student_service
from school.schemas import (
    DB_INT_MAX,
    DB_INT_MIN,
    FacultyResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)
from school.services.name_printer import NamePrinter
from school.services.student_service import StudentService

router = APIRouter()


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    data: StudentCreate,
    service: StudentService = Depends(get_student_service),
):
    """Create a student, optionally attached to an existing faculty."""
    logger.info(f"Was invoked POST endpoint for CREATE Student with name: {data.name}")
    return await service.create(data)


@router.get("", response_model=List[StudentResponse])
async def list_students(service: StudentService = Depends(get_student_service)):
    """List all students."""
    return await service.list_all()


# Static paths must be declared before /{student_id}

@router.get("/count", response_model=int)
async def count_students(service: StudentService = Depends(get_student_service)):
    """Total number of students."""
    return await service.count()


@router.get("/average-age", response_model=Optional[float])
async def average_age(service: StudentService = Depends(get_student_service)):
    """Average age computed by the database; null when there are no students."""
    return await service.average_age()


@router.get("/last-five", response_model=List[StudentResponse])
async def last_five_students(service: StudentService = Depends(get_student_service)):
    """The five most recently created students, newest first."""
    return await service.last_five()


@router.get("/age-between", response_model=List[StudentResponse])
async def students_by_age_between(
    min_age: int = Query(..., alias="minAge", ge=DB_INT_MIN, le=DB_INT_MAX),
    max_age: int = Query(..., alias="maxAge", ge=DB_INT_MIN, le=DB_INT_MAX),
    service: StudentService = Depends(get_student_service),
):
    """Students whose age is within [minAge, maxAge]."""
    return await service.list_by_age_between(min_age, max_age)


@router.get("/age/{age}", response_model=List[StudentResponse])
async def students_by_age(
    age: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: StudentService = Depends(get_student_service),
):
    """Students of exactly the given age."""
    return await service.list_by_age(age)


@router.get("/print-parallel", response_class=PlainTextResponse)
async def print_parallel(
    service: StudentService = Depends(get_student_service),
    printer: NamePrinter = Depends(get_name_printer),
):
    """Print six student names from three threads without synchronization."""
    names = await service.list_names()
    await asyncio.to_thread(printer.print_parallel, names)
    return "Students printed in parallel mode"


@router.get("/print-synchronized", response_class=PlainTextResponse)
async def print_synchronized(
    service: StudentService = Depends(get_student_service),
    printer: NamePrinter = Depends(get_name_printer),
):
    """Print six student names from three threads, one line at a time."""
    names = await service.list_names()
    await asyncio.to_thread(printer.print_synchronized, names)
    return "Students printed in synchronized mode"


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: StudentService = Depends(get_student_service),
):
    """Get a student by ID."""
    return await service.get(student_id)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    data: StudentUpdate,
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: StudentService = Depends(get_student_service),
):
    """Replace a student's name, age and faculty. Omitting facultyId clears it."""
    logger.info(f"Was invoked PUT endpoint for UPDATE Student with ID: {student_id}")
    return await service.update(student_id, data)


@router.delete("/{student_id}", response_model=StudentResponse)
async def delete_student(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: StudentService = Depends(get_student_service),
):
    """Delete a student and return it."""
    logger.info(f"Was invoked DELETE endpoint for DELETE Student by ID: {student_id}")
    return await service.delete(student_id)


@router.get("/{student_id}/faculty", response_model=FacultyResponse)
async def get_student_faculty(
    student_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: StudentService = Depends(get_student_service),
):
    """The faculty a student belongs to; 404 if the student has none."""
    return await service.get_faculty(student_id)
