"""Avatar image helpers: file naming and preview generation."""

import io
import re
import time
from typing import Optional

from PIL import Image, UnidentifiedImageError

from school.core.exceptions import ImageProcessingError
from school.core.logging import logger

PREVIEW_WIDTH = 100

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\s]')
_DISALLOWED_CHARS = re.compile(r"[^a-z0-9_.-]")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")
_EXTENSION = re.compile(r"[A-Za-z0-9]+")


def get_extension(filename: Optional[str]) -> Optional[str]:
    """Return the text after the last dot, or None when there is no dot."""
    if not filename or "." not in filename:
        return None
    return filename.rsplit(".", 1)[1]


def is_valid_extension(extension: Optional[str]) -> bool:
    """True for a non-empty, purely alphanumeric extension."""
    return extension is not None and _EXTENSION.fullmatch(extension) is not None


def normalize_file_name(name: Optional[str]) -> str:
    """Turn a student name into something safe to embed in a file name."""
    default_name = f"student_{int(time.time() * 1000)}"
    if name is None:
        logger.warning(f"File name is missing, using default name: {default_name}")
        return default_name

    normalized = name.strip().lower()
    normalized = _UNSAFE_CHARS.sub("_", normalized)
    normalized = _DISALLOWED_CHARS.sub("", normalized)
    normalized = _REPEATED_UNDERSCORES.sub("_", normalized)

    if not normalized:
        logger.warning(f"Normalized file name is empty, using default name: {default_name}")
        return default_name
    return normalized


def avatar_file_name(student_id: int, student_name: str, extension: str) -> str:
    return f"{student_id}_{normalize_file_name(student_name)}_full.{extension}"


def preview_height(width: int, height: int) -> int:
    """Height that keeps the aspect ratio at PREVIEW_WIDTH (truncated, at least 1)."""
    return max(1, int(height / width * PREVIEW_WIDTH))


def image_format_for(extension: str) -> str:
    """Pillow format name for a file extension, e.g. ``jpg`` -> ``JPEG``."""
    image_format = Image.registered_extensions().get(f".{extension.lower()}")
    if image_format is None:
        raise ImageProcessingError(f"Unsupported image format: {extension}")
    return image_format


def generate_preview(content: bytes, extension: str) -> bytes:
    """Scale an image down to PREVIEW_WIDTH pixels wide, re-encoded in its own format."""
    image_format = image_format_for(extension)

    try:
        with Image.open(io.BytesIO(content)) as original:
            original.load()
            width, height = original.size
            new_height = preview_height(width, height)
            logger.debug(
                f"Original image size: {width}x{height}, preview size: {PREVIEW_WIDTH}x{new_height}"
            )

            preview = original.resize((PREVIEW_WIDTH, new_height), Image.Resampling.BILINEAR)
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.warning(f"Failed to read image for preview generation: {e}")
        raise ImageProcessingError.unreadable_image() from e

    # JPEG has no alpha channel or palette
    if image_format == "JPEG" and preview.mode not in ("RGB", "L"):
        preview = preview.convert("RGB")

    try:
        with io.BytesIO() as buffer:
            preview.save(buffer, format=image_format)
            return buffer.getvalue()
    except (OSError, ValueError, KeyError) as e:
        raise ImageProcessingError.during("preview encoding") from e
