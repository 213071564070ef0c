import pytest

from filerelay.server import init_server, main, server_addresses, start_server


ENV_NAMES = ("HOST", "HTTP_PORT", "HTTPS_PORT", "DNS", "HTTPS", "TOKEN_APPLICATION")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class _FailingApp:
    def __init__(self):
        self.calls = []

    def run(self, **options):
        self.calls.append(options)
        raise OSError("address already in use")


def test_init_server_serves_api_spec():
    app = init_server()
    response = app.test_client().get("/swagger/doc.json")
    assert response.status_code == 200
    assert response.get_json()["info"]["title"] == "Simple File Redirect API"


def test_init_server_registers_manager_routes():
    app = init_server()
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    for route in ("upload", "download", "convert", "listen"):
        assert f"/manager/v1/{route}" in rules


def test_init_server_unknown_swagger_resource_is_404():
    response = init_server().test_client().get("/swagger/missing.txt")
    assert response.status_code == 404


def test_server_addresses_join_host_and_ports(clean_env):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("HTTP_PORT", "8080")
    clean_env.setenv("HTTPS_PORT", "8443")
    assert server_addresses() == ("127.0.0.1:8080", "127.0.0.1:8443")


def test_start_server_raises_when_http_listener_fails(clean_env):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("HTTP_PORT", "8080")
    clean_env.setenv("HTTPS_PORT", "8443")
    clean_env.setenv("HTTPS", "FALSE")
    app = _FailingApp()
    with pytest.raises(RuntimeError, match="error inicialize server http"):
        start_server(app)
    assert len(app.calls) == 1
    assert app.calls[0]["host"] == "127.0.0.1"
    assert app.calls[0]["port"] == 8080
    assert "ssl_context" not in app.calls[0]


def test_start_server_raises_on_invalid_port(clean_env):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("HTTP_PORT", "not-a-port")
    clean_env.setenv("HTTPS_PORT", "8443")
    app = _FailingApp()
    with pytest.raises(RuntimeError, match="http"):
        start_server(app)
    assert app.calls == []


def test_main_fails_without_env_file(clean_env, tmp_path):
    assert main(["--env-file", str(tmp_path / "missing.env")]) == 1


def test_main_fails_with_invalid_https_flag(clean_env, tmp_path):
    env_file = tmp_path / "settings.env"
    env_file.write_text(
        "HOST=127.0.0.1\n"
        "HTTP_PORT=8080\n"
        "HTTPS_PORT=8443\n"
        "DNS=files.example.com\n"
        "HTTPS=MAYBE\n"
        "TOKEN_APPLICATION=token\n",
        encoding="utf-8",
    )
    assert main(["--env-file", str(env_file)]) == 1


def test_main_fails_without_token(clean_env, tmp_path):
    env_file = tmp_path / "settings.env"
    env_file.write_text(
        "HOST=127.0.0.1\n"
        "HTTP_PORT=8080\n"
        "HTTPS_PORT=8443\n"
        "DNS=files.example.com\n"
        "HTTPS=FALSE\n",
        encoding="utf-8",
    )
    assert main(["--env-file", str(env_file)]) == 1