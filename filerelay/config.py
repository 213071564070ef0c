"""Environment configuration for the server and the application."""

from __future__ import annotations

import os
import ssl

from dotenv import load_dotenv

CERT_PATH = "./certificates/cert.crt"
KEY_PATH = "./certificates/privkey.key"


class ConfigError(Exception):
    """Raised when the environment is missing or holds invalid settings."""


def get_host_server() -> str:
    """Host the server binds to."""
    return os.environ.get("HOST", "")


def get_http_port() -> str:
    """Port of the HTTP listener."""
    return os.environ.get("HTTP_PORT", "")


def get_https_port() -> str:
    """Port of the HTTPS listener."""
    return os.environ.get("HTTPS_PORT", "")


def get_dns() -> str:
    """Public DNS name offered for the server."""
    return os.environ.get("DNS", "")


def get_token_app() -> str:
    """Bearer token that guards the application's routes."""
    return os.environ.get("TOKEN_APPLICATION", "")


def _https_flag() -> str:
    return os.environ.get("HTTPS", "").upper()


def get_https_use() -> bool:
    """Whether HTTPS is enabled and the certificate and key load correctly."""
    if _https_flag() != "TRUE":
        return False
    if not os.path.exists(CERT_PATH):
        print("Certificate file not found:", CERT_PATH)
        return False
    if not os.path.exists(KEY_PATH):
        print("Private key file not found:", KEY_PATH)
        return False
    try:
        ssl.create_default_context(ssl.Purpose.CLIENT_AUTH).load_cert_chain(
            CERT_PATH, KEY_PATH
        )
    except (ssl.SSLError, OSError) as err:
        print("Invalid TLS certificate or key:", err)
        return False
    return True


def validate_server_env() -> None:
    """Check every setting the server needs in order to start."""
    required = (
        ("HOST", get_host_server),
        ("HTTP_PORT", get_http_port),
        ("HTTPS_PORT", get_https_port),
        ("DNS", get_dns),
    )
    for name, getter in required:
        if not getter():
            raise ConfigError(f"variavel de ambiente {name} nao defindo no .env")
    https = _https_flag()
    if https not in ("TRUE", "FALSE"):
        raise ConfigError("variavel de ambiente HTTPS deve ser TRUE ou FALSE")
    if https == "TRUE" and not get_https_use():
        raise ConfigError("HTTPS esta ativo porem o certificado nao e valido")


def validate_application_env() -> None:
    """Check every setting the application needs."""
    if not get_token_app():
        raise ConfigError(
            "variavel de ambiente TOKEN_APPLICATION nao defindo no .env"
        )


def check_envs(dotenv_path: str | os.PathLike[str] | None = None) -> None:
    """Load the .env file and validate server and application settings.

    Variables already present in the environment are not overridden.
    """
    path = os.fspath(dotenv_path) if dotenv_path is not None else ".env"
    if not os.path.isfile(path):
        raise ConfigError(f"open {path}: no such file or directory")
    load_dotenv(path, override=False)
    validate_server_env()
    validate_application_env()