import os

from docker_engine_client import (
    DEFAULT_API_VERSION,
    HttpConnection,
    HttpsConnection,
    SocketConnection,
    config_from_env,
)


def test_empty_environment_uses_local_socket() -> None:
    config = config_from_env({}, platform="linux")
    assert config.connection == SocketConnection(socket_path="/var/run/docker.sock")
    assert config.version == DEFAULT_API_VERSION


def test_api_version_override() -> None:
    config = config_from_env({"DOCKER_HOST": "tcp://h:2375", "DOCKER_API_VERSION": "1.41"})
    assert config.connection == HttpConnection(host="h", port=2375)
    assert config.version == "1.41"


def test_cert_path_fills_tls_material() -> None:
    config = config_from_env({"DOCKER_HOST": "tcp://h:2376", "DOCKER_CERT_PATH": "/certs"})
    assert isinstance(config.connection, HttpsConnection)
    assert config.connection.ca == os.path.join("/certs", "ca.pem")
    assert config.connection.cert == os.path.join("/certs", "cert.pem")
    assert config.connection.key == os.path.join("/certs", "key.pem")


def test_cert_path_ignored_for_plain_http() -> None:
    config = config_from_env({"DOCKER_HOST": "tcp://h:2375", "DOCKER_CERT_PATH": "/certs"})
    assert config.connection == HttpConnection(host="h", port=2375)
