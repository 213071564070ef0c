"""HTTP routes for uploading, downloading, playing and converting files."""

from __future__ import annotations

import mimetypes
import os
import re
from contextlib import suppress
from functools import partial
from typing import BinaryIO

from flask import Blueprint, Flask, Response, abort, jsonify, request

from .apispec import build_spec
from .binding import BindingError, bind_convert, bind_upload
from .service import FileService

STORAGE_PREFIX = "internal/storage/files/"
_CHUNK_SIZE = 64 * 1024
_INVALID_PATH = "Caminho inválido: deve estar dentro de 'internal/storage/files/'"


def is_storage_path(path: str) -> bool:
    """Whether a path, once its slashes are normalised, lies in the storage directory."""
    normalized = path.replace(os.sep, "/")
    normalized = re.sub("/{2,}", "/", normalized)
    return normalized.startswith(STORAGE_PREFIX)


def _error(status: int, message: str):
    return jsonify(erro=message), status


def _serve_then_delete(
    service: FileService, path: str, handle: BinaryIO, mimetype: str, headers: dict[str, str]
) -> Response:
    response = Response(iter(partial(handle.read, _CHUNK_SIZE), b""), mimetype=mimetype)
    response.content_length = os.fstat(handle.fileno()).st_size
    response.headers.update(headers)

    def cleanup() -> None:
        handle.close()
        with suppress(OSError):
            service.delete_file(path)

    response.call_on_close(cleanup)
    return response


def create_app(service: FileService | None = None) -> Flask:
    """Build the web application with its routes bound to the given service."""
    service = service if service is not None else FileService()
    app = Flask(__name__)

    @app.get("/swagger/<path:resource>")
    def swagger(resource: str):
        if resource != "doc.json":
            abort(404)
        return jsonify(build_spec())

    v1 = Blueprint("v1", __name__, url_prefix="/manager/v1")

    def checked_path():
        path = request.args.get("path", "")
        if not path:
            return None, _error(400, "Parâmetro 'path' é obrigatório")
        if not is_storage_path(path):
            return None, _error(400, _INVALID_PATH)
        return path, None

    @v1.post("/upload")
    def upload():
        try:
            _, upload_file = bind_upload(request.files)
        except BindingError:
            return _error(400, "Arquivo e/ou campos obrigatórios não enviados")
        try:
            record = service.save_file(
                os.path.basename(upload_file.filename), upload_file.stream
            )
        except OSError:
            return _error(500, "Erro ao salvar o arquivo")
        return jsonify(
            msg="Upload realizado com sucesso",
            name=record.name,
            ext=record.ext,
            path=record.path,
        )

    @v1.get("/download")
    def download():
        path, failure = checked_path()
        if failure is not None:
            return failure
        try:
            handle = service.download_file(path)
        except OSError:
            return _error(404, "Arquivo não encontrado")
        headers = {
            "Content-Description": "File Transfer",
            "Content-Transfer-Encoding": "binary",
            "Content-Disposition": f'attachment; filename="{os.path.basename(path)}"',
        }
        return _serve_then_delete(service, path, handle, "application/octet-stream", headers)

    @v1.get("/listen")
    def listen():
        path, failure = checked_path()
        if failure is not None:
            return failure
        try:
            handle = service.download_file(path)
        except OSError:
            return _error(404, "Arquivo não encontrado")
        mimetype = mimetypes.guess_type(path)[0] or "application/octet-stream"
        return _serve_then_delete(service, path, handle, mimetype, {})

    @v1.post("/convert")
    def convert():
        try:
            convert_request, upload_file = bind_convert(request.files, request.form)
        except BindingError:
            return _error(400, "Arquivo e/ou campo 'convert' obrigatórios")
        try:
            record = service.save_file(
                os.path.basename(upload_file.filename), upload_file.stream
            )
        except OSError:
            return _error(500, "Erro ao salvar o arquivo")

        conversion = convert_request.to_model_convert()
        if conversion.ext_original.lower() != "mp3" or conversion.ext_destination.lower() != "ogg":
            return _error(400, "Conversão não suportada. Apenas mp3 para ogg é permitido")

        try:
            converted_path = service.convert_mp3_to_ogg(record.path)
        except Exception:
            return _error(500, "Erro ao converter arquivo")
        return jsonify(
            msg="Arquivo convertido com sucesso",
            original_name=record.name,
            original_ext=record.ext,
            converted_path=converted_path,
        )

    app.register_blueprint(v1)
    return app