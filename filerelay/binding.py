"""Extraction of upload requests from submitted multipart form data."""

from __future__ import annotations

from typing import Any, Mapping

from .models import ConvertRequest, UploadRequest


class BindingError(ValueError):
    """Raised when a request lacks a required file or field."""


def _form_file(files: Mapping[str, Any]) -> Any:
    upload = files.get("file")
    if upload is None or not getattr(upload, "filename", ""):
        raise BindingError("http: no such file")
    return upload


def bind_upload(files: Mapping[str, Any]) -> tuple[UploadRequest, Any]:
    """Return the upload request and the uploaded file from the 'file' field."""
    upload = _form_file(files)
    return UploadRequest(file=upload.filename), upload


def bind_convert(
    files: Mapping[str, Any], form: Mapping[str, str]
) -> tuple[ConvertRequest, Any]:
    """Return the conversion request and the uploaded file.

    Both the 'file' upload and a non-empty 'convert' field are required.
    """
    upload = _form_file(files)
    convert = form.get("convert", "") or ""
    if not convert:
        raise BindingError("campo 'convert' é obrigatório")
    return ConvertRequest(file=upload.filename, convert=convert), upload