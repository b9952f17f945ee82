import logging
from typing import Callable

import httpx
import pytest

from docker_engine_client import (
    ApiError,
    ClientConfig,
    ConflictError,
    DockerClient,
    HttpConnection,
    HttpsConnection,
    HttpTransport,
    NotFoundError,
    ServerError,
    SocketConnection,
)
from docker_engine_client.client import RequestOptions, parse_api_version

Handler = Callable[[httpx.Request], httpx.Response]


def make_client(handler: Handler, *, connection=None, **kwargs) -> tuple[DockerClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    transport = HttpTransport(client=httpx.Client(transport=httpx.MockTransport(recording)))
    client = DockerClient(
        connection or HttpConnection(host="docker.local", port=2375),
        transport=transport,
        **kwargs,
    )
    return client, requests


def ping_with_version(version: str | None) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        headers = {"Api-Version": version} if version else {}
        return httpx.Response(200, text="OK", headers=headers)

    return handler


def test_defaults() -> None:
    client, _ = make_client(ping_with_version("1.48"))
    assert client.version == "1.48"
    assert client.base_url == "http://docker.local:2375/v1.48"
    assert client.host == "docker.local"
    assert client.port == 2375


def test_socket_client_has_no_host() -> None:
    client, _ = make_client(ping_with_version("1.48"), connection=SocketConnection(socket_path="/run/docker.sock"))
    assert client.host is None
    assert client.port is None
    assert client.transport_options.socket_path == "/run/docker.sock"


def test_negotiation_downgrades_to_older_server() -> None:
    client, requests = make_client(ping_with_version("1.40"), version="1.48")
    assert client.negotiate_api_version() == "1.40"
    assert client.version == "1.40"
    assert requests[0].url.path == "/v1.48/_ping"


def test_negotiation_keeps_version_for_newer_server() -> None:
    client, _ = make_client(ping_with_version("1.50"), version="1.48")
    assert client.negotiate_api_version() == "1.48"
    assert client.version == "1.48"


def test_negotiation_does_not_rebuild_base_url() -> None:
    client, _ = make_client(ping_with_version("1.40"), version="1.48")
    client.negotiate_api_version()
    assert client.base_url.endswith("/v1.48")


def test_negotiation_without_header_returns_none(caplog: pytest.LogCaptureFixture) -> None:
    client, _ = make_client(ping_with_version(None), version="1.48")
    with caplog.at_level(logging.WARNING):
        assert client.negotiate_api_version() is None
    assert client.version == "1.48"
    assert "negotiate" in caplog.text


def test_negotiation_swallows_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client, _ = make_client(handler, version="1.48")
    assert client.negotiate_api_version() is None
    assert client.version == "1.48"


def test_negotiation_swallows_api_errors() -> None:
    client, _ = make_client(lambda request: httpx.Response(500, text="boom"))
    assert client.negotiate_api_version() is None


def test_negotiation_rejects_garbage_header() -> None:
    client, _ = make_client(ping_with_version("latest"))
    assert client.negotiate_api_version() is None
    assert client.version == "1.48"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1.48", 1.48), ("1.5", 1.5), ("1.41-beta", 1.41), (" 2", 2.0), ("1e1", 10.0), ("1.4e", 1.4)],
)
def test_parse_api_version_is_lenient(value: str, expected: float) -> None:
    assert parse_api_version(value) == expected


def test_fetch_returns_raw_response() -> None:
    client, requests = make_client(lambda request: httpx.Response(200, json=[{"Id": "abc"}]))
    response = client.fetch("/containers/json")
    assert isinstance(response, httpx.Response)
    assert response.json() == [{"Id": "abc"}]
    assert str(requests[0].url) == "http://docker.local:2375/v1.48/containers/json"


def test_fetch_raises_api_error_with_json_message() -> None:
    client, _ = make_client(lambda request: httpx.Response(404, json={"message": "no such container"}))
    with pytest.raises(ApiError) as info:
        client.fetch("/containers/missing/json")
    error = info.value
    assert isinstance(error, NotFoundError)
    assert error.status == 404
    assert error.message == "no such container"
    assert error.path == "/containers/missing/json"
    assert error.headers is not None
    assert str(error) == "no such container"


def test_fetch_304_without_body_has_fallback_message() -> None:
    client, _ = make_client(lambda request: httpx.Response(304))
    with pytest.raises(ApiError) as info:
        client.fetch("/containers/abc/start")
    assert info.value.status == 304
    assert info.value.message


def test_fetch_bad_json_error_body() -> None:
    client, _ = make_client(
        lambda request: httpx.Response(409, content=b"<html>", headers={"content-type": "application/json"})
    )
    with pytest.raises(ConflictError) as info:
        client.fetch("/containers/abc")
    assert info.value.message == "error from /containers/abc"


def test_fetch_plain_text_error_on_stream() -> None:
    client, _ = make_client(lambda request: httpx.Response(503, text="daemon busy"))
    with pytest.raises(ServerError) as info:
        client.fetch("/events", stream=True)
    assert info.value.message == "daemon busy"


def test_fetch_upgrade_accepts_switching_protocols() -> None:
    client, requests = make_client(lambda request: httpx.Response(101, headers={"Upgrade": "tcp"}))
    response = client.fetch("/containers/abc/attach", method="POST", stream=True, upgrade=True)
    try:
        assert response.status_code == 101
    finally:
        response.close()
    assert requests[0].headers["Upgrade"] == "tcp"
    assert requests[0].headers["Connection"] == "Upgrade"


def test_fetch_without_upgrade_rejects_switching_protocols() -> None:
    client, _ = make_client(lambda request: httpx.Response(101))
    with pytest.raises(ApiError) as info:
        client.fetch("/containers/abc/json")
    assert info.value.status == 101


def test_fetch_merges_headers_over_defaults() -> None:
    client, requests = make_client(
        lambda request: httpx.Response(200),
        default_headers={"User-Agent": "docker-engine-client", "X-Trace": "default"},
    )
    client.fetch("/_ping", headers={"X-Trace": "call"})
    headers = requests[0].headers
    assert headers["User-Agent"] == "docker-engine-client"
    assert headers["X-Trace"] == "call"


def test_fetch_serializes_json_body() -> None:
    client, requests = make_client(lambda request: httpx.Response(201, json={"Id": "abc"}))
    client.fetch("/containers/create", method="POST", json_body={"Image": "alpine"})
    assert requests[0].method == "POST"
    assert requests[0].headers["Content-Type"] == "application/json"
    assert requests[0].content == b'{"Image": "alpine"}'


def test_request_options_merge_field_by_field() -> None:
    defaults = RequestOptions(headers={"A": "1", "B": "2"}, timeout=30.0)
    merged = defaults.merged(headers={"B": "3"})
    assert merged.headers == {"A": "1", "B": "3"}
    assert merged.timeout == 30.0
    assert defaults.merged(timeout=5.0).timeout == 5.0
    assert defaults.headers == {"A": "1", "B": "2"}


def test_from_config() -> None:
    config = ClientConfig(connection=HttpsConnection(host="h", port=443), version="1.44")
    client = DockerClient.from_config(config, transport=HttpTransport(client=httpx.Client()))
    assert client.base_url == "https://h:443/v1.44"
    assert client.transport_options.tls is not None


def test_from_env() -> None:
    client = DockerClient.from_env(
        {"DOCKER_HOST": "tcp://10.1.1.1:2375", "DOCKER_API_VERSION": "1.41"},
        transport=HttpTransport(client=httpx.Client()),
    )
    assert client.base_url == "http://10.1.1.1:2375/v1.41"


def test_close_releases_transport() -> None:
    class DummyTransport:
        closed = False

        def send(self, *args, **kwargs) -> httpx.Response:  # pragma: no cover - not needed
            raise AssertionError

        def close(self) -> None:
            self.closed = True

    transport = DummyTransport()
    with DockerClient(HttpConnection(host="h"), transport=transport):
        pass
    assert transport.closed is True
