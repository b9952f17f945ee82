"""Connection descriptors and the ``DOCKER_HOST`` style connection-string parser.

A connection string has the form ``scheme://[user[:pass]@]host[:port][/path]``
where ``scheme`` is one of ``unix``, ``ssh``, ``http``, ``https`` or ``tcp``:

- ``unix:///var/run/docker.sock`` dials the unix socket at that path.
- ``ssh://me@example.com:22/var/run/docker.sock`` names a daemon behind SSH.
- ``http://host:2375/path`` and ``https://host:2376/path`` prepend ``path``
  to every request.
- ``tcp://host:port/path`` is plain HTTP unless the port is 2376, the
  conventional TLS port.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import ClassVar, Literal, Mapping, Union
from urllib.parse import SplitResult, urlsplit

from .errors import ConnectionStringError, UnsupportedSchemeError

ConnectionTag = Literal["socket", "ssh", "http", "https"]

DEFAULT_SSH_PORT = 22
DEFAULT_HTTP_PORT = 2375
DEFAULT_HTTPS_PORT = 2376
DEFAULT_HOST = "127.0.0.1"

UNIX_SOCKET_PATH = "/var/run/docker.sock"
WINDOWS_PIPE_PATH = "//./pipe/docker_engine"


@dataclass(frozen=True)
class SocketConnection:
    socket_path: str

    tag: ClassVar[ConnectionTag] = "socket"


@dataclass(frozen=True)
class SshConnection:
    host: str
    username: str | None = None
    password: str | None = None
    remote_socket_path: str = ""
    port: int = DEFAULT_SSH_PORT

    tag: ClassVar[ConnectionTag] = "ssh"


@dataclass(frozen=True)
class HttpConnection:
    host: str
    port: int = DEFAULT_HTTP_PORT
    path: str = ""

    tag: ClassVar[ConnectionTag] = "http"


@dataclass(frozen=True)
class HttpsConnection:
    host: str
    port: int = DEFAULT_HTTPS_PORT
    path: str = ""
    ca: str | None = None
    cert: str | None = None
    key: str | None = None
    passphrase: str | None = None

    tag: ClassVar[ConnectionTag] = "https"

    def __repr__(self) -> str:
        passphrase = "'***'" if self.passphrase else "None"
        return (
            f"HttpsConnection(host={self.host!r}, port={self.port}, path={self.path!r}, "
            f"ca={self.ca!r}, cert={self.cert!r}, key={self.key!r}, passphrase={passphrase})"
        )


ConnectionOptions = Union[SocketConnection, SshConnection, HttpConnection, HttpsConnection]


def parse_connection_string(value: str) -> ConnectionOptions:
    """Resolve a connection string into one of the connection descriptors.

    Raises:
        UnsupportedSchemeError: the scheme is not unix, ssh, http, https or tcp.
        ConnectionStringError: the port is not a number.
    """
    parsed = urlsplit(value.strip())
    scheme = parsed.scheme.lower()

    if scheme == "unix":
        return SocketConnection(socket_path=_socket_path(value))

    if scheme == "ssh":
        return SshConnection(
            host=parsed.hostname or "",
            username=parsed.username or None,
            password=parsed.password or None,
            remote_socket_path=parsed.path,
            port=_port(parsed, DEFAULT_SSH_PORT),
        )

    if scheme == "http":
        return HttpConnection(
            host=parsed.hostname or DEFAULT_HOST,
            port=_port(parsed, DEFAULT_HTTP_PORT),
            path=parsed.path.rstrip("/"),
        )

    if scheme == "https":
        return HttpsConnection(
            host=parsed.hostname or DEFAULT_HOST,
            port=_port(parsed, DEFAULT_HTTPS_PORT),
            path=parsed.path.rstrip("/"),
        )

    if scheme == "tcp":
        host = parsed.hostname or DEFAULT_HOST
        port = _port(parsed, DEFAULT_HTTP_PORT)
        path = parsed.path.rstrip("/")
        if port == DEFAULT_HTTPS_PORT:
            return HttpsConnection(host=host, port=port, path=path)
        return HttpConnection(host=host, port=port, path=path)

    raise UnsupportedSchemeError(scheme)


def default_socket_connection(platform: str | None = None) -> SocketConnection:
    """Connection to the daemon's default local socket for ``platform``."""
    platform = platform or sys.platform
    if platform == "win32":
        return SocketConnection(socket_path=WINDOWS_PIPE_PATH)
    return SocketConnection(socket_path=UNIX_SOCKET_PATH)


def connection_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
) -> ConnectionOptions:
    """Connection described by ``DOCKER_HOST``, or the default local socket."""
    env = os.environ if environ is None else environ
    docker_host = (env.get("DOCKER_HOST") or "").strip()
    if not docker_host:
        return default_socket_connection(platform)
    return parse_connection_string(docker_host)


def _socket_path(value: str) -> str:
    _, _, rest = value.strip().partition("://")
    return rest or UNIX_SOCKET_PATH


def _port(parsed: SplitResult, default: int) -> int:
    try:
        port = parsed.port
    except ValueError as exc:
        raise ConnectionStringError(f"Invalid port in connection string: {parsed.netloc}") from exc
    return port if port is not None else default


__all__ = [
    "ConnectionOptions",
    "ConnectionTag",
    "HttpConnection",
    "HttpsConnection",
    "SocketConnection",
    "SshConnection",
    "connection_from_env",
    "default_socket_connection",
    "parse_connection_string",
]
