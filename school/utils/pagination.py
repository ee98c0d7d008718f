"""1-based page numbers at the API boundary, offsets inside."""

from dataclasses import dataclass

from school.core.exceptions import InvalidPageRequestError


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


def create_page_request(page: int, size: int) -> PageRequest:
    if page < 1:
        raise InvalidPageRequestError("Page number must be greater than 0")
    if size <= 0:
        raise InvalidPageRequestError("Page size must be greater than 0")
    return PageRequest(page=page, size=size)


def total_pages(total: int, size: int) -> int:
    return (total + size - 1) // size
