"""Domain errors raised by the service layer.

Every error carries a stable ``error_code``; the HTTP status is derived from
that code in exactly one place (``status_code_for``) so services never deal
with HTTP concerns.
"""

from typing import Optional


class SchoolError(Exception):
    """Base class for all application errors."""

    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        super().__init__(message)


# ─── Not found ───────────────────────────────────────────────────────────────

class StudentNotFoundError(SchoolError):
    error_code = "STUDENT_NOT_FOUND"

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student with ID {student_id} not found")


class FacultyNotFoundError(SchoolError):
    error_code = "FACULTY_NOT_FOUND"

    def __init__(self, message: str):
        super().__init__(message)

    @classmethod
    def by_id(cls, faculty_id: int) -> "FacultyNotFoundError":
        return cls(f"Faculty with ID {faculty_id} not found")

    @classmethod
    def for_student_without_faculty(cls, student_id: int) -> "FacultyNotFoundError":
        return cls(f"Student with ID {student_id} has no Faculty")


class AvatarNotFoundError(SchoolError):
    error_code = "AVATAR_NOT_FOUND"

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Avatar not found for Student with ID {student_id}")


# ─── Client errors ───────────────────────────────────────────────────────────

class InvalidFileError(SchoolError):
    error_code = "INVALID_FILE"

    @classmethod
    def empty_file(cls) -> "InvalidFileError":
        return cls("Uploaded file is empty or invalid")

    @classmethod
    def missing_extension(cls) -> "InvalidFileError":
        return cls("File extension is missing or invalid")


class InsufficientStudentsError(SchoolError):
    error_code = "INSUFFICIENT_STUDENTS"

    def __init__(self, required: int, found: int):
        self.required = required
        self.found = found
        super().__init__(
            f"Insufficient students for operation. Required: {required}, found: {found}"
        )


class InvalidPageRequestError(SchoolError):
    error_code = "INVALID_PAGE_REQUEST"


# ─── Server-side processing errors ───────────────────────────────────────────

class FileProcessingError(SchoolError):
    error_code = "FILE_PROCESSING_ERROR"

    @classmethod
    def during(cls, operation: str) -> "FileProcessingError":
        return cls(f"Failed to process file during {operation} operation")


class ImageProcessingError(SchoolError):
    error_code = "IMAGE_PROCESSING_ERROR"

    @classmethod
    def during(cls, operation: str) -> "ImageProcessingError":
        return cls(f"Failed to process image during {operation}")

    @classmethod
    def unreadable_image(cls) -> "ImageProcessingError":
        return cls("Could not read image file")


class ThreadExecutionError(SchoolError):
    error_code = "THREAD_EXECUTION_ERROR"

    @classmethod
    def during(cls, operation: str) -> "ThreadExecutionError":
        return cls(f"Thread execution failed during {operation} operation")


# ─── Status mapping ──────────────────────────────────────────────────────────

CLIENT_ERROR_CODES = {"INVALID_FILE", "INSUFFICIENT_STUDENTS", "INVALID_PAGE_REQUEST"}


def status_code_for(error_code: str) -> int:
    """Map an error code to its HTTP status."""
    if error_code.endswith("_NOT_FOUND"):
        return 404
    if error_code in CLIENT_ERROR_CODES:
        return 400
    return 500
