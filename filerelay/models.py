"""File records and the request objects that produce them."""

from __future__ import annotations

from dataclasses import dataclass


def split_extension(filename: str) -> tuple[str, str]:
    """Split a file name into its stem and its extension without the dot.

    The extension is whatever follows the last dot of the final path
    element; a name without such a dot has an empty extension.
    """
    dot = filename.rfind(".")
    if dot == -1 or dot < filename.rfind("/"):
        return filename, ""
    return filename[:dot], filename[dot + 1:]


@dataclass
class FileRecord:
    """A stored file: its name, extension and location on disk."""

    name: str
    ext: str
    path: str = ""


@dataclass
class FileConversion:
    """A requested conversion from one extension to another."""

    name: str
    ext_original: str
    ext_destination: str
    path: str = ""


@dataclass
class UploadRequest:
    """An upload request carrying the uploaded file's name."""

    file: str

    def to_model(self) -> FileRecord:
        """Build a file record with the name and extension split apart."""
        name, ext = split_extension(self.file)
        return FileRecord(name=name, ext=ext)


@dataclass
class ConvertRequest:
    """A conversion request: the uploaded file's name and the target extension."""

    file: str
    convert: str

    def to_model_convert(self) -> FileConversion:
        """Build a conversion record; the target extension is lower-cased."""
        name, ext = split_extension(self.file)
        return FileConversion(
            name=name,
            ext_original=ext,
            ext_destination=self.convert.lower(),
        )