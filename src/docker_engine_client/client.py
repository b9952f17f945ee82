"""High-level client for the Docker Engine API."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import httpx

from .config import DEFAULT_API_VERSION, DEFAULT_TIMEOUT, ClientConfig, config_from_env
from .connection import ConnectionOptions, HttpConnection, HttpsConnection
from .errors import DockerEngineError, NegotiationError, api_error_for_status
from .logger import LogLevel, create_logger
from .query import extract_error_message
from .resources import Containers, Execs, System
from .transport import HttpTransport, Transport, configure

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class RequestOptions:
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None

    def merged(self, headers: Mapping[str, str] | None = None, timeout: float | None = None) -> "RequestOptions":
        """Copy with caller values layered on top; unset fields keep these defaults."""
        merged_headers = dict(self.headers)
        merged_headers.update(headers or {})
        return RequestOptions(
            headers=merged_headers,
            timeout=timeout if timeout is not None else self.timeout,
        )


def parse_api_version(value: str) -> float:
    """Read the leading decimal number of an ``Api-Version`` header.

    The result is compared as a float: ``"1.48"`` is 1.48 and ``"1.5"`` is 1.5,
    so 1.48 < 1.5. This is not the daemon's dotted-version comparison. An
    exponent (``"1e1"``) is read as part of the number and trailing text is
    ignored.
    """
    match = _LEADING_NUMBER.match(value or "")
    if not match:
        raise NegotiationError(f"Invalid API version {value!r}", context=value)
    return float(match.group(0))


class DockerClient:
    """Primary entry point for talking to a Docker daemon.

    The resource method sets ``containers``, ``execs`` and ``system`` all go
    through :meth:`fetch`.
    """

    def __init__(
        self,
        connection: ConnectionOptions,
        *,
        version: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        default_headers: Mapping[str, str] | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        self.version = version or DEFAULT_API_VERSION
        self.base_url, self.transport_options = configure(connection, self.version)
        self.host: str | None = None
        self.port: int | None = None
        if isinstance(connection, (HttpConnection, HttpsConnection)):
            self.host = connection.host
            self.port = connection.port

        self._logger = create_logger(logger=logger, level=log_level).child("client")
        self._logger.info("Initializing DockerClient for %s (%s)", self.base_url, connection.tag)
        self._transport = transport or HttpTransport(
            self.transport_options,
            timeout=timeout,
            logger=self._logger,
        )
        self.default_request_options = RequestOptions(headers=dict(default_headers or {}))

        self.containers = Containers(self)
        self.execs = Execs(self)
        self.system = System(self)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "DockerClient":
        return cls(
            config.connection,
            version=config.version,
            timeout=config.timeout,
            default_headers=config.default_headers,
            log_level=config.log_level,
            **kwargs,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs: Any) -> "DockerClient":
        return cls.from_config(config_from_env(environ), **kwargs)

    def negotiate_api_version(self) -> str | None:
        """Lower ``version`` to the daemon's API version when the daemon is older.

        Returns the version now in use, or ``None`` when negotiation failed; the
        client then keeps its current version. Call once, before issuing other
        requests. ``base_url`` keeps the version prefix it was built with.
        """
        try:
            response = self.system.ping()
            server_version = response.headers.get("Api-Version")
            if not server_version:
                raise NegotiationError("Ping response has no Api-Version header")
            server_number = parse_api_version(server_version)
            client_number = parse_api_version(self.version)
        except (DockerEngineError, httpx.HTTPError) as exc:
            self._logger.warn("Failed to negotiate API version: %s", exc)
            return None

        if server_number < client_number:
            self._logger.warn(
                "Server API version %s is lower than client API version %s, downgrading",
                server_version,
                self.version,
            )
            self.version = server_version
            return server_version
        return self.version

    def fetch(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        content: bytes | Iterable[bytes] | None = None,
        json_body: Any | None = None,
        timeout: float | None = None,
        stream: bool = False,
        upgrade: bool = False,
    ) -> httpx.Response:
        """Send one request to ``base_url + path`` and return the raw response.

        ``json_body`` is serialized as the request body with a JSON content
        type. With ``stream=True`` the body is left unread and the caller must
        close the response.

        ``content`` may be an iterable of byte chunks to stream the body.
        ``upgrade=True`` asks for a raw-stream upgrade and accepts the
        daemon's ``101`` reply as success.

        Raises:
            ApiError: the daemon answered with a non-2xx status (or non-101 for an upgrade).
            ConnectionError: the daemon could not be reached.
        """
        options = self.default_request_options.merged(headers=headers, timeout=timeout)
        if json_body is not None:
            content = json.dumps(json_body).encode("utf-8")
            options.headers.setdefault("Content-Type", "application/json")
        if upgrade:
            options.headers.update({"Upgrade": "tcp", "Connection": "Upgrade"})

        response = self._transport.send(
            method,
            f"{self.base_url}{path}",
            headers=options.headers,
            content=content,
            timeout=options.timeout,
            stream=stream,
        )
        if response.is_success or (upgrade and response.status_code == 101):
            return response

        try:
            response.read()
        except httpx.HTTPError as exc:
            self._logger.debug("Could not read error body from %s: %s", path, exc)
        message = extract_error_message(response, path)
        response.close()
        self._logger.debug("API error path=%s status=%s message=%s", path, response.status_code, message)
        raise api_error_for_status(path, response.status_code, message, response.headers)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "DockerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["DockerClient", "RequestOptions", "parse_api_version"]
