"""Server start-up: configuration check, HTTP and optional HTTPS listeners."""

from __future__ import annotations

import argparse
import logging
import queue
import threading
from typing import Any, Sequence

from flask import Flask

from .app import create_app
from .config import (
    CERT_PATH,
    KEY_PATH,
    ConfigError,
    check_envs,
    get_host_server,
    get_http_port,
    get_https_port,
    get_https_use,
)

log = logging.getLogger(__name__)


def init_server() -> Flask:
    """Build the web application with all of its routes registered."""
    return create_app()


def server_addresses() -> tuple[str, str]:
    """Return the HTTP and HTTPS listen addresses as 'host:port' strings."""
    host = get_host_server()
    return f"{host}:{get_http_port()}", f"{host}:{get_https_port()}"


def _split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    return host, int(port)


def _serve(
    app: Any,
    address: str,
    label: str,
    errors: "queue.Queue[BaseException]",
    ssl_context: tuple[str, str] | None = None,
) -> None:
    try:
        host, port = _split_address(address)
        log.info("Server listen on %s://%s", "https" if ssl_context else "http", address)
        options: dict[str, Any] = {
            "host": host,
            "port": port,
            "use_reloader": False,
            "threaded": True,
        }
        if ssl_context is not None:
            options["ssl_context"] = ssl_context
        app.run(**options)
    except Exception as err:  # any failure to listen is fatal for the server
        errors.put(RuntimeError(f"error inicialize server {label}: {err}"))


def start_server(app: Any) -> None:
    """Serve the application over HTTP, and over HTTPS when it is enabled.

    Blocks for as long as the listeners run and raises RuntimeError as soon
    as one of them fails.
    """
    errors: "queue.Queue[BaseException]" = queue.Queue()
    http_address, https_address = server_addresses()

    threading.Thread(
        target=_serve,
        args=(app, http_address, "http", errors),
        daemon=True,
    ).start()

    if get_https_use():
        threading.Thread(
            target=_serve,
            args=(app, https_address, "https", errors),
            kwargs={"ssl_context": (CERT_PATH, KEY_PATH)},
            daemon=True,
        ).start()

    raise errors.get()


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the environment and run the server; return the exit status."""
    parser = argparse.ArgumentParser(
        description="Serve file upload, download and MP3 to OGG conversion."
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="path of the .env file to load (default: ./.env)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        check_envs(args.env_file)
    except ConfigError as err:
        log.error("%s", err)
        return 1

    try:
        start_server(init_server())
    except RuntimeError as err:
        log.error("%s", err)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0