"""File storage on disk and audio conversion through ffmpeg."""

from __future__ import annotations

import os
import shutil
import subprocess
import uuid
from typing import BinaryIO

DEFAULT_DIRECTORY = "./internal/storage/files"


class StorageError(OSError):
    """Raised when a file cannot be saved or deleted."""


class ConversionError(Exception):
    """Raised when a file cannot be converted."""


class StorageManager:
    """Saves uploaded files under a directory with unique names."""

    def __init__(self, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> None:
        self.directory = os.fspath(directory)

    def save_file(self, filename: str, stream: BinaryIO) -> str:
        """Copy the stream to a new file and return its path.

        The stored name is a fresh UUID, an underscore and the original name.
        """
        try:
            os.makedirs(self.directory, exist_ok=True)
        except OSError as err:
            raise StorageError(f"erro ao criar diretorio: {err}") from err

        final_name = f"{uuid.uuid4()}_{filename}"
        destination = os.path.normpath(os.path.join(self.directory, final_name))
        try:
            with open(destination, "wb") as target:
                shutil.copyfileobj(stream, target)
        except OSError as err:
            raise StorageError(f"erro ao salvar o arquivo: {err}") from err
        return destination

    def delete_file(self, path: str | os.PathLike[str]) -> bool:
        """Remove the file at path; return True once it is gone."""
        path = os.fspath(path)
        if not os.path.exists(path):
            raise StorageError(f"arquivo não encontrado: {path}")
        try:
            os.remove(path)
        except OSError as err:
            raise StorageError(f"erro ao deletar arquivo: {err}") from err
        return True


class Converter:
    """Converts MP3 files to OGG by running ffmpeg."""

    def __init__(self, ffmpeg: str = "ffmpeg") -> None:
        self.ffmpeg = ffmpeg

    def convert_mp3_to_ogg(self, input_path: str) -> str:
        """Convert an .mp3 file to .ogg beside it and return the new path."""
        if not input_path.lower().endswith(".mp3"):
            raise ConversionError(
                "formato inválido: somente arquivos .mp3 são suportados"
            )
        output_path = input_path[: -len(".mp3")] + ".ogg"
        try:
            subprocess.run(
                [self.ffmpeg, "-y", "-i", input_path, output_path],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
            )
        except (subprocess.CalledProcessError, OSError) as err:
            raise ConversionError(f"erro ao converter arquivo: {err}") from err
        return output_path