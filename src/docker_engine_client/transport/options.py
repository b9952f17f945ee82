"""Translate a connection descriptor into a base URL and dialing options."""

from __future__ import annotations

import ssl

from ..connection import (
    ConnectionOptions,
    HttpConnection,
    HttpsConnection,
    SocketConnection,
    SshConnection,
)
from .base import TlsOptions, TransportOptions

# Never resolved: the special-use ".localhost" TLD keeps the URL valid for
# socket connections, whose bytes go through the socket path instead of DNS.
DUMMY_HOST = "api.moby.localhost"

# SSH connections are forwarded below the HTTP layer.
SSH_PLACEHOLDER_HOST = "0.0.0.0"


def configure(connection: ConnectionOptions, api_version: str | None) -> tuple[str, TransportOptions]:
    return request_base_url(connection, api_version), transport_options(connection)


def request_base_url(connection: ConnectionOptions, api_version: str | None = None) -> str:
    version = f"/v{api_version}" if api_version else ""
    if isinstance(connection, SshConnection):
        return f"http://{SSH_PLACEHOLDER_HOST}{version}"
    if isinstance(connection, SocketConnection):
        return f"http://{DUMMY_HOST}{version}"
    if isinstance(connection, HttpConnection):
        return f"http://{_url_host(connection.host)}:{connection.port}{connection.path}{version}"
    if isinstance(connection, HttpsConnection):
        return f"https://{_url_host(connection.host)}:{connection.port}{connection.path}{version}"
    raise TypeError(f"Unknown connection type: {type(connection).__name__}")


def _url_host(host: str) -> str:
    # IPv6 literals need their brackets back in a URL authority.
    if ":" in host and not host.startswith("["):
        return f"[{host}]"
    return host


def transport_options(connection: ConnectionOptions) -> TransportOptions:
    if isinstance(connection, SocketConnection):
        return TransportOptions(socket_path=connection.socket_path)
    if isinstance(connection, HttpsConnection):
        return TransportOptions(
            tls=TlsOptions(
                ca=connection.ca,
                cert=connection.cert,
                key=connection.key,
                passphrase=connection.passphrase,
            )
        )
    return TransportOptions()


def create_ssl_context(tls: TlsOptions) -> ssl.SSLContext:
    """SSL context trusting ``tls.ca`` (or the system store) with an optional client cert.

    ``ca`` may be a file path or PEM text; ``cert`` and ``key`` are file paths.
    """
    if tls.ca and tls.ca.lstrip().startswith("-----BEGIN"):
        context = ssl.create_default_context(cadata=tls.ca)
    elif tls.ca:
        context = ssl.create_default_context(cafile=tls.ca)
    else:
        context = ssl.create_default_context()
    if tls.cert:
        context.load_cert_chain(tls.cert, keyfile=tls.key, password=tls.passphrase)
    return context


__all__ = [
    "DUMMY_HOST",
    "configure",
    "create_ssl_context",
    "request_base_url",
    "transport_options",
]
