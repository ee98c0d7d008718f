"""Local filesystem storage for full-size avatar files."""

import os
import tempfile
from typing import BinaryIO, Iterator

from school.core.logging import logger

CHUNK_SIZE = 64 * 1024


class LocalStorageService:
    """Save and read back files under a single root directory."""

    def __init__(self, root: str):
        self.root = root

    def ensure_root(self) -> None:
        """Create the storage directory if it is missing."""
        if not os.path.isdir(self.root):
            logger.info(f"Creating storage directory: {self.root}")
            os.makedirs(self.root, exist_ok=True)

    def path_for(self, file_name: str) -> str:
        return os.path.join(self.root, file_name)

    def stage(self, content: bytes) -> str:
        """Write ``content`` to a temporary file under the root and return its path."""
        fd, temp_path = tempfile.mkstemp(dir=self.root, prefix=".upload-", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
        except OSError:
            self.discard(temp_path)
            raise

        logger.debug(f"Staged {len(content)} bytes at {temp_path}")
        return temp_path

    def commit(self, temp_path: str, file_name: str) -> str:
        """Move a staged file to ``file_name``, replacing any existing file."""
        full_path = self.path_for(file_name)
        os.replace(temp_path, full_path)

        logger.debug(f"Saved locally: {full_path}")
        return full_path

    def discard(self, temp_path: str) -> None:
        try:
            os.remove(temp_path)
        except FileNotFoundError:
            pass

    def open(self, path: str) -> BinaryIO:
        """Open a stored file for reading. Raises OSError if it is gone or unreadable."""
        return open(path, "rb")

    @staticmethod
    def iter_chunks(handle: BinaryIO) -> Iterator[bytes]:
        """Yield a file's content in chunks, closing it when exhausted."""
        try:
            while True:
                chunk = handle.read(CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk
        finally:
            handle.close()
