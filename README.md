# filerelay

A small HTTP service for relaying files: a client uploads a file, receives
the path it was stored under, and later fetches it once, either as a
download or as a stream to play directly. A stored file is deleted once it
has been served. The service can also convert uploaded MP3 files to OGG by
running `ffmpeg`.

## Installation

```
pip install .
```

Conversion needs `ffmpeg` on the `PATH`. For the tests:

```
pip install .[test]
pytest
```

## Configuration

`filerelay` loads a `.env` file (by default `./.env`; another one with
`--env-file PATH`) without overriding variables already set in the
environment. It refuses to start if the file does not exist or if any of
these settings is missing or invalid:

| Variable            | Meaning                                                   |
|---------------------|-----------------------------------------------------------|
| `HOST`              | Address to bind to                                        |
| `HTTP_PORT`         | Port for plain HTTP                                       |
| `HTTPS_PORT`        | Port for HTTPS                                            |
| `DNS`               | Public name of the server (required, not otherwise used)  |
| `HTTPS`             | `TRUE` or `FALSE` (any letter case)                       |
| `TOKEN_APPLICATION` | Application token (required, see below)                   |

With `HTTPS=TRUE` the server also listens on `HTTPS_PORT`, using
`./certificates/cert.crt` and `./certificates/privkey.key`; both files must
exist and load as a valid certificate and key pair, or start-up fails.

Example `.env`:

```
HOST=0.0.0.0
HTTP_PORT=8080
HTTPS_PORT=8443
DNS=files.example.com
HTTPS=FALSE
TOKEN_APPLICATION=token
```

## Running

```
filerelay
filerelay --env-file /etc/filerelay/.env
```

The command validates the configuration, then serves the application with
Flask's built-in server on `HOST:HTTP_PORT` (and `HOST:HTTPS_PORT` when
HTTPS is enabled). It exits with status 1 if the configuration is invalid or
a listener fails to start.

## Endpoints

All routes live under `/manager/v1`. Errors are returned as JSON with an
`erro` key.

- `POST /manager/v1/upload` — multipart form with a `file` field. The file is
  stored as `internal/storage/files/<uuid>_<name>` relative to the working
  directory. The response holds `msg`, `name`, `ext` and `path`.
  400 when the file is missing, 500 when it cannot be saved.
- `GET /manager/v1/download?path=...` — sends the stored file as an
  `application/octet-stream` attachment, then deletes it.
- `GET /manager/v1/listen?path=...` — returns the stored file with a content
  type guessed from its name (for example `audio/mpeg`), then deletes it.
- `POST /manager/v1/convert` — multipart form with `file` and `convert`. The
  file is saved first; only a `.mp3` file with `convert=ogg` is accepted
  (400 otherwise). The MP3 is converted to an `.ogg` file beside it and the
  MP3 is deleted. The response holds `msg`, `original_name`, `original_ext`
  and `converted_path`.

For `download` and `listen`, `path` is required and, after its separators are
normalised and repeated slashes collapsed, must start with
`internal/storage/files/` (400 otherwise); a missing file gives 404.

A Swagger 2.0 description of these routes is served at `/swagger/doc.json`;
`filerelay.apispec.build_spec(host, base_path, schemes)` returns the same
document as a dictionary.

## What it does not do

- The routes do not check any token. `TOKEN_APPLICATION` must be set for the
  server to start, and the API description mentions bearer and `token`
  parameters, but no request is refused for lacking or carrying a wrong
  token. Put the service behind something that authenticates if it needs
  protecting.
- Only the JSON API description is served; there is no Swagger UI page.
- The server is Flask's development server, not a production WSGI server.

## Using it from Python

```python
from filerelay.app import create_app
from filerelay.service import FileService
from filerelay.storage import Converter, StorageManager

service = FileService(StorageManager("./internal/storage/files"), Converter("ffmpeg"))
app = create_app(service)
app.run(port=8080)
```

`FileService` offers `save_file(filename, stream)`, `download_file(path)`,
`delete_file(path)` and `convert_mp3_to_ogg(path)`. Note that the `download`
and `listen` routes only accept paths under `internal/storage/files/`,
whatever directory the `StorageManager` is given.
`filerelay.config.check_envs(dotenv_path)` performs the start-up checks and
raises `ConfigError` on failure.