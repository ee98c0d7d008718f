"""Avatar upload, preview and retrieval."""

import asyncio
from typing import BinaryIO, List, Optional, Tuple

from school.core.exceptions import (
    AvatarNotFoundError,
    FileProcessingError,
    InvalidFileError,
)
from school.core.logging import logger
from school.mappers import avatar_to_info, avatar_to_preview
from school.models import Avatar
from school.repositories import AvatarRepository
from school.schemas import AvatarInfoResponse, AvatarPageResponse, AvatarPreviewResponse
from school.services.storage_service import LocalStorageService
from school.services.student_service import StudentService
from school.utils.images import (
    avatar_file_name,
    generate_preview,
    get_extension,
    is_valid_extension,
)
from school.utils.pagination import create_page_request, total_pages


class AvatarService:
    """Stores full-size avatars on disk and a 100px-wide preview in the database."""

    def __init__(
        self,
        avatars: AvatarRepository,
        student_service: StudentService,
        storage: LocalStorageService,
    ):
        self.avatars = avatars
        self.student_service = student_service
        self.storage = storage

    async def upload(
        self,
        student_id: int,
        content: Optional[bytes],
        filename: Optional[str],
        content_type: Optional[str],
    ) -> AvatarInfoResponse:
        """Save the original file, build its preview and upsert the avatar row."""
        logger.info(f"Was invoked method for UPLOAD Avatar for Student with ID: {student_id}")

        if not content or not filename:
            logger.warning(f"Attempt to UPLOAD empty file or file without name for Student with ID: {student_id}")
            raise InvalidFileError.empty_file()

        extension = get_extension(filename)
        if not is_valid_extension(extension):
            logger.warning(f"File without a usable extension provided for Student with ID: {student_id}")
            raise InvalidFileError.missing_extension()

        student = await self.student_service.get_entity(student_id)
        logger.debug(f"Found Student: {student.name} with ID: {student_id}")

        file_name = avatar_file_name(student.id, student.name, extension)
        try:
            self.storage.ensure_root()
            temp_path = self.storage.stage(content)
        except OSError as e:
            logger.error(f"Failed to save file for Student with ID: {student_id}: {e}")
            raise FileProcessingError.during("file transfer") from e

        # The stored original is only replaced once the preview and the row are good
        try:
            logger.debug(f"GENERATING preview Avatar for Student with ID: {student_id}")
            preview = await asyncio.to_thread(generate_preview, content, extension)

            avatar = await self.avatars.upsert(
                student_id=student.id,
                file_path=self.storage.path_for(file_name),
                file_size=len(content),
                media_type=content_type,
                data=preview,
            )

            try:
                self.storage.commit(temp_path, file_name)
            except OSError as e:
                logger.error(f"Failed to move file into place for Student with ID: {student_id}: {e}")
                raise FileProcessingError.during("file transfer") from e
        finally:
            self.storage.discard(temp_path)

        logger.info(f"Avatar successfully uploaded for Student with ID: {student_id}")
        return avatar_to_info(avatar)

    async def get_entity(self, student_id: int) -> Avatar:
        avatar = await self.avatars.get_by_student(student_id)
        if avatar is None:
            logger.error(f"Avatar not found for Student with ID: {student_id}")
            raise AvatarNotFoundError(student_id)
        return avatar

    async def get_info(self, student_id: int) -> AvatarInfoResponse:
        logger.info(f"Was invoked method for FIND Avatar info for Student with ID: {student_id}")
        return avatar_to_info(await self.get_entity(student_id))

    async def get_preview(self, student_id: int) -> Avatar:
        logger.info(f"Was invoked method for FIND Avatar data for Student with ID: {student_id}")
        return await self.get_entity(student_id)

    async def open_full(self, student_id: int) -> Tuple[BinaryIO, AvatarInfoResponse]:
        """Open the stored original. The caller is responsible for closing the handle."""
        logger.info(f"Was invoked method for GET Avatar from file for Student with ID: {student_id}")

        info = avatar_to_info(await self.get_entity(student_id))
        try:
            handle = self.storage.open(info.file_path)
        except OSError as e:
            logger.error(f"Failed to open Avatar file {info.file_path} for Student with ID: {student_id}: {e}")
            raise FileProcessingError.during("avatar file streaming") from e

        return handle, info

    async def list_page(self, page: int, size: int) -> AvatarPageResponse:
        logger.info(f"Was invoked method for GET ALL avatars with pagination, page: {page}, size: {size}")

        request = create_page_request(page, size)
        total = await self.avatars.count()
        avatars = await self.avatars.list_page(request.offset, request.size)
        logger.debug(f"Found {len(avatars)} avatars on page {page}")

        return AvatarPageResponse(
            content=[avatar_to_preview(a) for a in avatars],
            page=request.page,
            size=request.size,
            total_elements=total,
            total_pages=total_pages(total, request.size),
        )

    async def list_all(self) -> List[AvatarPreviewResponse]:
        logger.info("Was invoked method for GET ALL avatars")
        return [avatar_to_preview(a) for a in await self.avatars.list_all()]
