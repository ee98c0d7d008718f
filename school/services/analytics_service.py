"""In-application analytics over students and faculties, plus sum demos."""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import List

from school.core.logging import logger
from school.repositories import FacultyRepository, StudentRepository

LIMIT = 1_000_000
SUM_WORKERS = 4


def _sum_range(start: int, stop: int) -> int:
    return sum(range(start, stop))


class AnalyticsService:
    """Computations done in Python over whole tables, as opposed to SQL aggregates."""

    def __init__(self, students: StudentRepository, faculties: FacultyRepository):
        self.students = students
        self.faculties = faculties

    async def names_starting_with(self, letter: str) -> List[str]:
        """Upper-cased student names with the given prefix, sorted. Blank input matches nothing."""
        logger.info(f"Was invoked method for GET student names starting with '{letter}'")

        if letter is None or not letter.strip():
            logger.warning("Starting letter is null or empty")
            return []

        prefix = letter.strip().upper()
        names = sorted(
            name.upper()
            for name in await self.students.list_names()
            if name.upper().startswith(prefix)
        )

        logger.debug(f"Found {len(names)} student names starting with '{prefix}'")
        return names

    async def average_age(self) -> float:
        logger.info("Was invoked method to GET average age of students")

        ages = await self.students.list_ages()
        average = sum(ages) / len(ages) if ages else 0.0

        logger.debug(f"Calculated average age: {average}")
        return average

    async def longest_faculty_name(self) -> str:
        logger.info("Was invoked method for GET longest faculty name")

        longest = max(await self.faculties.list_names(), key=len, default="")

        logger.debug(f"Longest faculty name: {longest} ({len(longest)} characters)")
        return longest

    # ── Sum of 1..LIMIT, three ways ──────────────────────

    @staticmethod
    def original_sum(limit: int = LIMIT) -> int:
        """Add the numbers one at a time."""
        logger.info(f"Was invoked method for CALCULATE original sum from 1 to {limit}")
        start = time.perf_counter()

        total = 0
        for value in range(1, limit + 1):
            total += value

        logger.info(f"Original sum calculated in {(time.perf_counter() - start) * 1000:.1f} ms. Result = {total}")
        return total

    @staticmethod
    def optimized_sum(limit: int = LIMIT, workers: int = SUM_WORKERS) -> int:
        """Split the range into chunks and sum them on a thread pool."""
        logger.info(f"Was invoked method for CALCULATE optimized sum from 1 to {limit}")
        start = time.perf_counter()

        chunk = limit // workers + 1
        bounds = [(lo, min(lo + chunk, limit + 1)) for lo in range(1, limit + 1, chunk)]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            total = sum(executor.map(lambda b: _sum_range(*b), bounds))

        logger.info(f"Optimized sum calculated in {(time.perf_counter() - start) * 1000:.1f} ms. Result = {total}")
        return total

    @staticmethod
    def math_sum(limit: int = LIMIT) -> int:
        """Closed form n(n+1)/2."""
        logger.info(f"Was invoked method for CALCULATE mathematical sum from 1 to {limit}")
        total = limit * (limit + 1) // 2
        logger.info(f"Mathematical sum result = {total}")
        return total
