"""The OpenAPI (Swagger 2.0) description of the HTTP interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

TITLE = "Simple File Redirect API"
VERSION = "1.0"
DESCRIPTION = "API para upload, download e conversão de arquivos mp3 para ogg"

_PREFIX = "/manager/v1"
_STORED_PATH = "Caminho completo do arquivo salvo"


@dataclass(frozen=True)
class _Param:
    name: str
    kind: str
    location: str
    description: str

    def render(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "description": self.description,
            "name": self.name,
            "in": self.location,
            "required": True,
        }


@dataclass(frozen=True)
class _Endpoint:
    route: str
    method: str
    summary: str
    description: str
    tag: str
    params: tuple[_Param, ...]
    responses: dict[int, str]
    returns_file: bool = False
    secured: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    def render(self) -> dict[str, Any]:
        operation: dict[str, Any] = {}
        if self.secured:
            operation["security"] = [{"BearerAuth": []}]
        operation["description"] = self.description
        if self.returns_file:
            operation["produces"] = ["application/octet-stream"]
        else:
            operation["consumes"] = ["multipart/form-data"]
            operation["produces"] = ["application/json"]
        operation["tags"] = [self.tag]
        operation["summary"] = self.summary
        operation["parameters"] = [param.render() for param in self.params]
        operation["responses"] = {
            str(code): self._response(code, text)
            for code, text in self.responses.items()
        }
        return {self.method: operation}

    def _response(self, code: int, text: str) -> dict[str, Any]:
        if code == 200 and self.returns_file:
            schema: dict[str, Any] = {"type": "file"}
        else:
            schema = {"type": "object", "additionalProperties": {"type": "string"}}
        return {"description": text, "schema": schema}


def _form_file(description: str) -> _Param:
    return _Param("file", "file", "formData", description)


def _query(name: str, description: str) -> _Param:
    return _Param(name, "string", "query", description)


_ENDPOINTS = (
    _Endpoint(
        route="convert",
        method="post",
        summary="Conversão de arquivo MP3 para OGG",
        description="Realiza upload e conversão de um arquivo MP3 para OGG",
        tag="Conversão",
        params=(
            _form_file("Arquivo MP3 para conversão"),
            _Param("convert", "string", "formData", "Extensão de destino (ex: ogg)"),
        ),
        responses={
            200: "Arquivo convertido com sucesso",
            400: "Erro de validação ou tipo de conversão não suportado",
            500: "Erro interno ao converter",
        },
        secured=True,
    ),
    _Endpoint(
        route="download",
        method="get",
        summary="Download de arquivo",
        description="Realiza o download de um arquivo salvo, baseado no path informado",
        tag="Arquivos",
        params=(
            _query("path", _STORED_PATH),
            _query("token", "Token para download do arquivo salvo"),
        ),
        responses={
            200: "Arquivo enviado",
            400: "Parâmetro ausente",
            404: "Arquivo não encontrado",
        },
        returns_file=True,
    ),
    _Endpoint(
        route="listen",
        method="get",
        summary="Ouvir arquivo",
        description=(
            "Retorna o arquivo de áudio para ser reproduzido diretamente, sem download"
        ),
        tag="Arquivos",
        params=(
            _query("path", _STORED_PATH),
            _query("token", "Token para acesso ao arquivo"),
        ),
        responses={
            200: "Arquivo de áudio retornado",
            400: "Parâmetro ausente ou inválido",
            404: "Arquivo não encontrado",
        },
        returns_file=True,
    ),
    _Endpoint(
        route="upload",
        method="post",
        summary="Upload de arquivo",
        description=(
            "Recebe um arquivo via multipart/form e salva no diretório de arquivos"
        ),
        tag="Arquivos",
        params=(_form_file("Arquivo para upload"),),
        responses={
            200: "Upload realizado com sucesso",
            400: "Erro de validação",
            500: "Erro ao salvar",
        },
        secured=True,
    ),
)


def build_spec(
    host: str = "", base_path: str = "/", schemes: Iterable[str] = ()
) -> dict[str, Any]:
    """Return the Swagger 2.0 document describing the API."""
    return {
        "schemes": list(schemes),
        "swagger": "2.0",
        "info": {
            "description": DESCRIPTION,
            "title": TITLE,
            "contact": {},
            "version": VERSION,
        },
        "host": host,
        "basePath": base_path,
        "paths": {
            f"{_PREFIX}/{endpoint.route}": endpoint.render()
            for endpoint in _ENDPOINTS
        },
        "securityDefinitions": {
            "BearerAuth": {
                "description": "Forneça o token no formato: Bearer <token>",
                "type": "apiKey",
                "name": "Authorization",
                "in": "header",
            }
        },
    }