"""Analytics endpoints computed in application code."""

from typing import List

from fastapi import APIRouter, Depends, Query

from school.dependencies import get_analytics_service
from school.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("/students/names-starting-with", response_model=List[str])
async def names_starting_with(
    letter: str = Query("A", description="Case-insensitive first letter"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Upper-cased student names starting with `letter`, sorted."""
    return await service.names_starting_with(letter)


@router.get("/students/average-age-students", response_model=float)
async def average_age_students(service: AnalyticsService = Depends(get_analytics_service)):
    """Average student age computed in Python (0.0 when there are no students)."""
    return await service.average_age()


@router.get("/faculties/longest-name-faculty", response_model=str)
async def longest_faculty_name(service: AnalyticsService = Depends(get_analytics_service)):
    """The longest faculty name, or an empty string."""
    return await service.longest_faculty_name()


# Plain def: FastAPI runs these in its threadpool, off the event loop

@router.get("/compute/original-sum", response_model=int)
def original_sum():
    """Sum of 1..1,000,000 with a plain loop."""
    return AnalyticsService.original_sum()


@router.get("/compute/optimized-sum", response_model=int)
def optimized_sum():
    """Sum of 1..1,000,000 split across a thread pool."""
    return AnalyticsService.optimized_sum()


@router.get("/compute/math-sum", response_model=int)
def math_sum():
    """Sum of 1..1,000,000 via n(n+1)/2."""
    return AnalyticsService.math_sum()
