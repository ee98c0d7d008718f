"""Faculty endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from school.core.logging import logger
from school.dependencies import get_faculty_service
from school.schemas import (
    DB_INT_MAX,
    DB_INT_MIN,
    FacultyCreate,
    FacultyResponse,
    FacultyUpdate,
    StudentResponse,
)
from school.services.faculty_service import FacultyService

router = APIRouter()


@router.post("", response_model=FacultyResponse, status_code=status.HTTP_201_CREATED)
async def create_faculty(
    data: FacultyCreate,
    service: FacultyService = Depends(get_faculty_service),
):
    """Create a faculty."""
    logger.info(f"Was invoked POST endpoint for CREATE Faculty with name: {data.name}")
    return await service.create(data)


@router.get("", response_model=List[FacultyResponse])
async def list_faculties(service: FacultyService = Depends(get_faculty_service)):
    """List all faculties."""
    return await service.list_all()


@router.get("/color/{color}", response_model=List[FacultyResponse])
async def faculties_by_color(color: str, service: FacultyService = Depends(get_faculty_service)):
    """Faculties with the given color (case-insensitive)."""
    return await service.list_by_color(color)


@router.get("/search", response_model=List[FacultyResponse])
async def search_faculties(
    name_or_color: str = Query(..., alias="nameOrColor"),
    service: FacultyService = Depends(get_faculty_service),
):
    """Faculties whose name or color equals the query (case-insensitive)."""
    return await service.search(name_or_color)


@router.get("/{faculty_id}", response_model=FacultyResponse)
async def get_faculty(
    faculty_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: FacultyService = Depends(get_faculty_service),
):
    """Get a faculty by ID."""
    return await service.get(faculty_id)


@router.put("/{faculty_id}", response_model=FacultyResponse)
async def update_faculty(
    data: FacultyUpdate,
    faculty_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: FacultyService = Depends(get_faculty_service),
):
    """Replace a faculty's name and color."""
    logger.info(f"Was invoked PUT endpoint for UPDATE Faculty with ID: {faculty_id}")
    return await service.update(faculty_id, data)


@router.delete("/{faculty_id}", response_model=FacultyResponse)
async def delete_faculty(
    faculty_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: FacultyService = Depends(get_faculty_service),
):
    """Delete a faculty; its students stay, without a faculty."""
    logger.info(f"Was invoked DELETE endpoint for DELETE Faculty by ID: {faculty_id}")
    return await service.delete(faculty_id)


@router.get("/{faculty_id}/students", response_model=List[StudentResponse])
async def faculty_students(
    faculty_id: int = Path(..., ge=DB_INT_MIN, le=DB_INT_MAX),
    service: FacultyService = Depends(get_faculty_service),
):
    """Students of a faculty (404 if the faculty does not exist)."""
    return await service.list_students(faculty_id)
