"""Application service tying file storage and conversion together."""

from __future__ import annotations

import errno
import os
from typing import BinaryIO

from .models import FileRecord, split_extension
from .storage import Converter, StorageManager


class FileService:
    """Saves, opens, deletes and converts stored files."""

    def __init__(
        self,
        storage_manager: StorageManager | None = None,
        converter: Converter | None = None,
    ) -> None:
        self.storage_manager = storage_manager if storage_manager is not None else StorageManager()
        self.converter = converter if converter is not None else Converter()

    def save_file(self, filename: str, stream: BinaryIO) -> FileRecord:
        """Store the stream and describe the stored file."""
        path = self.storage_manager.save_file(filename, stream)
        name, ext = split_extension(filename)
        return FileRecord(name=name, ext=ext, path=path)

    def download_file(self, path: str) -> BinaryIO:
        """Open a stored file for reading in binary mode."""
        if not os.path.exists(path):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return open(path, "rb")

    def delete_file(self, path: str) -> bool:
        """Remove a stored file; return True once it is gone."""
        return self.storage_manager.delete_file(path)

    def convert_mp3_to_ogg(self, path: str) -> str:
        """Convert an MP3 file to OGG, delete the original, return the new path."""
        result_path = self.converter.convert_mp3_to_ogg(path)
        self.delete_file(path)
        return result_path